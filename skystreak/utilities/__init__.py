"""
This package provides the configuration plumbing shared by the rest of skystreak.

* :mod:`.options` holds the :class:`.UserOptions` dataclass base used for every options object.
* :mod:`.mixin_classes` holds the mixins that apply those options and give classes printing/equality behavior.
"""

from skystreak.utilities.options import UserOptions
from skystreak.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting, UserOptionConfigured

__all__ = ["UserOptions", "AttributeEqualityComparison", "AttributePrinting", "UserOptionConfigured"]
