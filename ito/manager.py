"""Creation, deletion and listing of links."""

import logging
from typing import List, Optional

from .common.validators import is_valid_alias, is_valid_url
from .database.base import LinkStoreBase
from .database.models import Link
from .errors import InvalidAlias, InvalidUrl


class LinkManager:
    """Service layer for link management business logic."""
    
    def __init__(self, store: LinkStoreBase, logger: Optional[logging.Logger] = None):
        """Initialize the link manager.
        
        Args:
            store: Link store instance
            logger: Optional logger
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
    
    async def create(self, alias: str, target_url: str) -> Link:
        """Create a new link.
        
        Args:
            alias: Public alias for the link
            target_url: Absolute URL to redirect to
            
        Returns:
            The stored link
            
        Raises:
            InvalidUrl: If the target is not an absolute URL
            InvalidAlias: If the alias cannot be used as a path segment
            DuplicateAlias: If the alias is already taken
        """
        target_url = (target_url or "").strip()
        
        is_valid, error = is_valid_url(target_url)
        if not is_valid:
            raise InvalidUrl(f"invalid URL: {error}")
        
        is_valid, error = is_valid_alias(alias)
        if not is_valid:
            raise InvalidAlias(f"invalid alias: {error}")
        
        link_id = await self.store.insert_link(alias, target_url)
        
        self.logger.info(f"Created link {link_id}: {alias} -> {target_url}")
        return Link(id=link_id, alias=alias, target_url=target_url)
    
    async def delete(self, link_id: int) -> None:
        """Delete a link by id. Succeeds whether or not the link exists."""
        await self.store.delete_by_id(link_id)
        self.logger.info(f"Deleted link {link_id}")
    
    async def list_links(self) -> List[Link]:
        return await self.store.list_links()
