"""
This package contains helpful mixin classes to provide basic functionality throughout skystreak.
"""

from skystreak.utilities.mixin_classes.attribute_equality_comparison import AttributeEqualityComparison
from skystreak.utilities.mixin_classes.attribute_printing import AttributePrinting
from skystreak.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["AttributeEqualityComparison", "AttributePrinting", "UserOptionConfigured"]
