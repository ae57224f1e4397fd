# Process wide runtime flags set once by the command line handling
# and read by the output and command execution helpers.
#
# Keeping this in a dict ensures that the values are shared across imports.
from typing import NotRequired, TypedDict


class _StorageDict(TypedDict):
	dry_run: NotRequired[bool]
	color: NotRequired[bool]
	debug: NotRequired[bool]


storage: _StorageDict = {}
