"""Alias -> target lookup for redirects."""

import logging
from typing import Optional

from .database.base import LinkStoreBase
from .errors import NotFound


class RedirectResolver:
    """Resolves aliases to their redirect targets."""
    
    def __init__(self, store: LinkStoreBase, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
    
    async def resolve(self, alias: str) -> str:
        """Get the target URL for an alias.
        
        Args:
            alias: The alias to resolve, matched case-sensitively
            
        Returns:
            The target URL
            
        Raises:
            NotFound: If the alias is unknown
            StorageUnavailable: If the store fails
        """
        try:
            link = await self.store.find_by_alias(alias)
        except NotFound:
            self.logger.warning(f"Alias not found: {alias}")
            raise
        
        self.logger.debug(f"Resolved {alias} -> {link.target_url}")
        return link.target_url
