"""Load and save the XML document that backs the catalog."""
import logging
import os
import stat
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from bookcatalog.exceptions import DocumentNotFoundError, TranscodeError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_document(location: Optional[PathLike]) -> ET.ElementTree:
    """
    Load the catalog document from disk.
    
    Args:
        location: Path of the XML file
        
    Returns:
        Parsed element tree
        
    Raises:
        DocumentNotFoundError: If the file is missing or empty
        TranscodeError: If the file is not well-formed XML
    """
    if not location:
        raise DocumentNotFoundError(location)
    
    path = Path(location)
    # A file holding nothing but whitespace counts as empty
    if not path.is_file() or not path.read_bytes().strip():
        raise DocumentNotFoundError(location)
    
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise TranscodeError(f"XML file is not well-formed: {location} ({e})") from e
    
    logger.debug(f"Loaded document: {location}")
    return tree


def save_document(tree: ET.ElementTree, location: PathLike) -> None:
    """
    Write the document back to disk.
    
    The tree is written to a temporary file next to the target and then
    moved over it, so readers see either the old or the new document.
    
    Args:
        tree: Element tree to write
        location: Path of the XML file
    """
    path = Path(location)
    ET.indent(tree, space="  ")
    
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            tree.write(f, encoding="utf-8", xml_declaration=True)
            f.write(b"\n")
        if path.exists():
            os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise
    
    logger.info(f"Saved document: {location}")
