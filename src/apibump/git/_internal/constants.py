"""Internal pygit2 constants - keeps trivia out of public modules."""

from __future__ import annotations

from pygit2.enums import FileMode, ObjectType

# Object types
OBJ_TREE = ObjectType.TREE
OBJ_BLOB = ObjectType.BLOB

# Tree entry file modes
FILEMODE_BLOB_EXECUTABLE = FileMode.BLOB_EXECUTABLE
FILEMODE_LINK = FileMode.LINK
FILEMODE_COMMIT = FileMode.COMMIT
