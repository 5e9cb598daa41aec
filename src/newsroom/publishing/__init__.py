"""Publication lifecycle: pending queue, confirmation and records."""

from newsroom.publishing.manager import PublicationManager, create_publication_manager
from newsroom.publishing.models import Publication

__all__ = ["Publication", "PublicationManager", "create_publication_manager"]
