"""
This module provides the :class:`UserOptionConfigured` mixin that configures a class from a :class:`.UserOptions`
dataclass and remembers that configuration so it can be restored later.

Example::

    from dataclasses import dataclass

    @dataclass
    class PixelBlobOptions(UserOptions):
        max_absorbed_size: int | None = None

    class PixelBlob(UserOptionConfigured[PixelBlobOptions], PixelBlobOptions):
        def __init__(self, options: PixelBlobOptions | None = None):
            super().__init__(PixelBlobOptions, options=options)

    blob = PixelBlob()
    blob.max_absorbed_size = 10
    blob.reset_settings()   # back to None

.. Note::
    :class:`UserOptionConfigured` must come first in the bases so that its ``__init__`` runs first.
"""

from typing import Generic, TypeVar

from skystreak.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing UserOptions-based configuration with reset capability.

    Subclass it with the options type as the type parameter and the options dataclass as another base, so that every
    option becomes an instance attribute with a type known to checkers.

    :attr original_options: The options given at initialization, used by :meth:`reset_settings`.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional preconfigured instance of `options_type`.  If `None` the defaults are used.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = options

    def reset_settings(self) -> None:
        """
        Resets the class to the options it was originally initialized with.
        """

        self._original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The options used during initialization.
        """
        return self._original_options
