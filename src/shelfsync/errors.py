class ShelfSyncError(Exception):
    """Base class for every failure surfaced by a sync run"""


class ConfigurationError(ShelfSyncError):
    """Raise when settings are missing/invalid or the document lacks its anchor markers"""


class UpstreamError(ShelfSyncError):
    """Raise when the shelf feed cannot be fetched or parsed"""


class PersistenceError(ShelfSyncError):
    """Raise when writing the document or committing/pushing it fails"""
