"""
Factory for creating family groupers.
"""
from typing import Dict, Optional, Type
from voyage_catalog.analysis.families.base_grouper import BaseFamilyGrouper
from voyage_catalog.analysis.families.name_grouper import NameFamilyGrouper
from voyage_catalog.analysis.families.variant_grouper import VariantFamilyGrouper
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class GrouperFactory:
    """
    Factory for creating the family grouper of each grouping mode.
    """

    def __init__(self):
        # Register groupers
        self._groupers: Dict[str, Type[BaseFamilyGrouper]] = {
            NameFamilyGrouper.mode: NameFamilyGrouper,
            VariantFamilyGrouper.mode: VariantFamilyGrouper,
        }

    @property
    def modes(self):
        return list(self._groupers)

    def get_grouper(self, mode: str) -> Optional[BaseFamilyGrouper]:
        """
        Get a grouper for the specified mode.

        Args:
            mode (str): The grouping mode ('storefront', 'admin')

        Returns:
            Optional[BaseFamilyGrouper]: A grouper instance, or None if the mode is unknown
        """
        if mode not in self._groupers:
            logger.warning(f"Unknown grouping mode: {mode}")
            return None

        return self._groupers[mode]()

    def get_all_groupers(self) -> Dict[str, BaseFamilyGrouper]:
        """
        Get groupers for all registered modes.

        Returns:
            Dict[str, BaseFamilyGrouper]: Dictionary mapping mode names to grouper instances
        """
        return {mode: self.get_grouper(mode) for mode in self._groupers}
