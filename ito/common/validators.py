"""Validation utilities for links."""

from urllib.parse import urlparse
from typing import Tuple

MAX_URL_LENGTH = 2048
MAX_ALIAS_LENGTH = 256

# Paths served by fixed routes; a link with one of these aliases is unreachable.
RESERVED_ALIASES = {"favicon.ico"}


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a target URL.
    
    A target must be absolute: it needs both a scheme and a host.
    
    Args:
        url: The URL to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"
    
    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"
    
    if any(ch.isspace() for ch in url):
        return False, "URL must not contain whitespace"
    
    try:
        result = urlparse(url)
        # Accessing .port validates the port number
        result.port
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"
    
    if not result.scheme:
        return False, "URL must have a scheme (e.g. https://)"
    
    if not result.hostname:
        return False, "URL must have a host"
    
    return True, ""


def is_valid_alias(alias: str) -> Tuple[bool, str]:
    """Validate an alias.
    
    Args:
        alias: The alias to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not alias or not isinstance(alias, str):
        return False, "Alias is required"
    
    if len(alias) > MAX_ALIAS_LENGTH:
        return False, f"Alias must be at most {MAX_ALIAS_LENGTH} characters"
    
    if "/" in alias:
        return False, "Alias must not contain '/'"
    
    if any(ch.isspace() for ch in alias):
        return False, "Alias must not contain whitespace"
    
    if alias in RESERVED_ALIASES:
        return False, f"'{alias}' is reserved and cannot be used"
    
    return True, ""
