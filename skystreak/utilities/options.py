"""
This module provides the :class:`UserOptions` abstract dataclass used to configure the classes in skystreak.
"""

from dataclasses import dataclass, fields, asdict

from typing import Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    The options hold the defaults for the settings of the class they configure.  By convention an options class is
    named ``<ClassName>Options`` and is handed to ``<ClassName>.__init__`` through the ``options`` keyword argument.

    Applying the options copies every declared field onto the target as an attribute:

        >>> @dataclass
        >>> class RectifierOptions(UserOptions):
        >>>     max_passes: int | None = None

        >>> class Rectifier:
        >>>     def __init__(self, options=None):
        >>>         if options is None:
        >>>             options = RectifierOptions()
        >>>         options.apply_options(self)
        >>> print(Rectifier().max_passes)
        ...     None
    """

    def override_options(self) -> None:
        """
        Hook for subclasses that need to adjust values right before they are applied.
        """
        pass

    def apply_options(self, target: object) -> None:
        """
        Set each option as an attribute of `target`.

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        A dictionary mapping each declared option name to its current value.

        Only dataclass fields are included; internal attributes and methods are ignored.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}

    @classmethod
    def from_dict(cls, values: dict[str, Any]):
        """
        Build an instance from a dictionary, rejecting keys that are not declared options.

        :param values: the mapping of option names to values
        :return: the new options instance
        :raises ValueError: if a key does not name an option of this class
        """

        known = {field.name for field in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f'unknown options for {cls.__name__}: {sorted(unknown)}')

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """
        The options as a plain (recursively converted) dictionary, suitable for json.
        """

        return asdict(self)
