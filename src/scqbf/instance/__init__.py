"""Instance model and reader for SC-QBF problem files."""

from scqbf.instance.models import Instance
from scqbf.instance.reader import InstanceFormatError, parse_instance, read_instance

__all__ = ["Instance", "InstanceFormatError", "parse_instance", "read_instance"]
