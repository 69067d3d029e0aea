"""
This module provides a class implementing default __str__ and __repr__ functionality.
"""


class AttributePrinting:
    """
    A mixin class that prints the class name and its attributes for __str__ and __repr__.

    Attributes starting with an underscore are reported through the public property of the same name when one exists,
    and skipped otherwise.
    """

    def _build_representation(self, attribute_repr: bool) -> str:
        """
        Turn the instance into ``ClassName(attr=value, ...)``.

        :param attribute_repr: Whether to call repr on attributes instead of str.
        """

        attributes = []
        for attr, value in self.__dict__.items():
            if attr.startswith('_'):
                prop_name = attr.lstrip('_')
                if not isinstance(getattr(type(self), prop_name, None), property):
                    continue
                attr = prop_name
                value = getattr(self, prop_name)

            text = f"{attr}={value!r}" if attribute_repr else f"{attr}={value}"
            attributes.append(text.replace('\n', ''))

        return f"{type(self).__name__}({', '.join(attributes)})"

    def __str__(self) -> str:
        return self._build_representation(False)

    def __repr__(self) -> str:
        return self._build_representation(True)
