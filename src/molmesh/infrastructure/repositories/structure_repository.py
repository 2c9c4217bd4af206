# src/molmesh/infrastructure/repositories/structure_repository.py
"""Repository implementation for structure and mesh files."""

import logging
import os
import urllib.error
import urllib.request
from typing import List, Optional

from ...config import GeometryOptions
from ...domain.exceptions import MalformedRecordError, StructureFetchError
from ...domain.implementations.obj_mesh_parser import PolygonMeshParser
from ...domain.models.mesh_buffer import MeshBuffer
from ...domain.models.molecular_graph import MolecularGraph
from ...interfaces.repository import ReadOnlyRepository
from ...services.structure_service import StructureService

logger = logging.getLogger(__name__)

RCSB_DOWNLOAD_URL = "https://files.rcsb.org/download/{pdb_id}.pdb"
FETCH_TIMEOUT = 30


def fetch_rcsb(pdb_id: str, timeout: float = FETCH_TIMEOUT) -> str:
    """
    Download a structure from the RCSB archive.

    A single attempt is made; there is no retry.

    Args:
        pdb_id: Four-character PDB identifier, e.g. ``1CRN``
        timeout: Socket timeout in seconds

    Returns:
        File content as text

    Raises:
        StructureFetchError: If the identifier is invalid or the download fails
    """
    code = (pdb_id or "").strip().upper()
    if len(code) != 4 or not code.isalnum():
        raise StructureFetchError(f"Invalid PDB identifier {pdb_id!r}")

    url = RCSB_DOWNLOAD_URL.format(pdb_id=code)
    logger.info(f"Fetching {url}")
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:  # nosec B310 - fixed https host
            return response.read().decode("utf-8")
    except urllib.error.HTTPError as error:
        raise StructureFetchError(f"Failed to load PDB {code}: HTTP {error.code} {error.reason}") from error
    except (urllib.error.URLError, OSError) as error:
        raise StructureFetchError(f"Failed to load PDB {code}: {error}") from error
    except UnicodeDecodeError as error:
        raise StructureFetchError(f"Failed to load PDB {code}: response is not UTF-8 text") from error


def read_text_file(path: str) -> str:
    """
    Read a structure or mesh file as UTF-8 text.

    Raises:
        OSError: If the file cannot be opened
        MalformedRecordError: If the content is not valid UTF-8
    """
    with open(path, "rb") as f:
        data = f.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as error:
        raise MalformedRecordError(
            f"{path} is not UTF-8 text (byte {error.start})", record=str(path)
        ) from None


class StructureRepository(ReadOnlyRepository[MolecularGraph]):
    """Repository reading ``<id>.pdb`` and ``<id>.obj`` files from a directory.

    Every call re-reads and re-parses the file; nothing is cached.
    """

    def __init__(self, data_dir: str, options: Optional[GeometryOptions] = None):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing structure and mesh files
            options: Geometry options used when building graphs
        """
        self._data_dir = data_dir
        self._service = StructureService(options)
        self._mesh_parser = PolygonMeshParser()

    def _path(self, id: str, extension: str) -> str:
        return os.path.join(self._data_dir, f"{id}{extension}")

    def get(self, id: str, model: Optional[int] = None) -> Optional[MolecularGraph]:
        """
        Load a structure by ID.

        Args:
            id: File stem of the ``.pdb`` file
            model: Optional model number to keep

        Returns:
            Centred MolecularGraph with inferred bonds, or None if no such file

        Raises:
            MalformedRecordError: If the file contains an unreadable record
        """
        file_path = self._path(id, ".pdb")
        if not os.path.exists(file_path):
            logger.debug(f"No structure file at {file_path}")
            return None

        return self._service.load(read_text_file(file_path), model=model)

    def get_mesh(self, id: str) -> Optional[MeshBuffer]:
        """Load ``<id>.obj`` as a MeshBuffer, or None if the file is missing."""
        file_path = self._path(id, ".obj")
        if not os.path.exists(file_path):
            logger.debug(f"No mesh file at {file_path}")
            return None

        return self._mesh_parser.parse(read_text_file(file_path))

    def ids(self) -> List[str]:
        """Sorted stems of every ``.pdb`` file in the data directory."""
        return sorted(
            os.path.splitext(name)[0]
            for name in os.listdir(self._data_dir)
            if name.endswith(".pdb")
        )

    def fetch(self, pdb_id: str) -> MolecularGraph:
        """Download a structure from RCSB and build its graph."""
        return self._service.load(fetch_rcsb(pdb_id))
