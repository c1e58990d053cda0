"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import List

from .models import Link


class LinkStoreBase(ABC):
    """Abstract base class for link store operations."""
    
    def __init__(self, db_config: str):
        """Initialize the store.
        
        Args:
            db_config: Database location (file path or connection string)
        """
        self.db_config = db_config
    
    @abstractmethod
    async def initialize(self) -> None:
        """Create the schema if it does not exist yet."""
        pass
    
    @abstractmethod
    async def list_links(self) -> List[Link]:
        """List every link, oldest first.
        
        Returns:
            Links ordered by id ascending
        """
        pass
    
    @abstractmethod
    async def insert_link(self, alias: str, target_url: str) -> int:
        """Insert a new link.
        
        Args:
            alias: Public alias, unique across all links
            target_url: Redirect destination
            
        Returns:
            The id assigned to the new link
            
        Raises:
            DuplicateAlias: If the alias is already taken
        """
        pass
    
    @abstractmethod
    async def find_by_alias(self, alias: str) -> Link:
        """Look up a link by alias.
        
        Args:
            alias: The alias to look up (case-sensitive)
            
        Returns:
            The matching link
            
        Raises:
            NotFound: If no link has this alias
        """
        pass
    
    @abstractmethod
    async def delete_by_id(self, link_id: int) -> None:
        """Delete a link by id. Deleting a missing id is a no-op.
        
        Args:
            link_id: The id of the link to delete
        """
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is usable.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Release all store resources."""
        pass
