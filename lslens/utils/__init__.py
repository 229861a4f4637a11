from lslens.utils.exceptions import LsLensException, InvalidRecordError
from lslens.utils.owner_cache import OwnerCache
from lslens.utils.size_formatter import SizeFormatter

__all__ = [
    'LsLensException',
    'InvalidRecordError',
    'OwnerCache',
    'SizeFormatter',
]
