"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with the facts the renderers need about an entry: whether it
    is a directory, its size, its root-relative path, and whether a directory could
    actually be listed. Inherits tree traversal and manipulation capabilities from
    anytree.Node.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        file_size (int): Size of a file in bytes; 0 for directories and unreadable files.
        relative_path (str): Forward-slash path relative to the analysis root
            ("" for the root itself).
        accessible (bool): False for a directory whose entries could not be listed.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root, file_size=12, relative_path="file.txt")
        >>> root.name
        'root'
        >>> child.is_dir
        False
        >>> child.file_size
        12
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        file_size: int = 0,
        relative_path: str = "",
        accessible: bool = True,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            file_size: File size in bytes. Defaults to 0.
            relative_path: Path relative to the analysis root. Defaults to "".
            accessible: Whether a directory's entries could be listed. Defaults to True.
            **kwargs: Additional attributes to set on the node.
        """
        super().__init__(name, parent=parent, **kwargs)
        self.is_dir = is_dir
        self.file_size = file_size
        self.relative_path = relative_path
        self.accessible = accessible
