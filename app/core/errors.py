"""
Error taxonomy shared by the record store and the API routes
"""


class RecordStoreError(Exception):
    """Base class for record store failures"""


class ValidationError(RecordStoreError):
    """A required field was missing or empty"""


class StoreError(RecordStoreError):
    """The remote spreadsheet call failed (auth, network, quota, bad response)"""
