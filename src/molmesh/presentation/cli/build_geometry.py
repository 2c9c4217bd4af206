"""Command-line interface converting structure and mesh files to geometry buffers."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
from tqdm.auto import tqdm

from ...config import GeometryOptions
from ...domain.exceptions import GeometryError
from ...domain.implementations.obj_mesh_parser import PolygonMeshParser
from ...infrastructure.repositories.structure_repository import fetch_rcsb, read_text_file
from ...services.backbone_service import BackboneService
from ...services.geometry_service import GeometryService
from ...services.structure_service import StructureService
from ...utils.benchmarking import PerformanceStats, timer

logger = logging.getLogger(__name__)

MODES = ("simple", "merged", "backbone")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure console logging for the CLI."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Convert PDB structures and OBJ meshes to render buffers (.npz)",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("inputs", nargs="*", help=".pdb or .obj files to convert")
    parser.add_argument(
        "--rcsb", nargs="+", default=[], metavar="PDB_ID", help="PDB IDs to download from RCSB"
    )
    parser.add_argument("--output-dir", default=".", help="Directory for .npz files")
    parser.add_argument(
        "--mode", choices=MODES, default="simple", help="Output layout for structures"
    )
    parser.add_argument("--model", type=int, default=None, help="Keep only this model number")
    parser.add_argument("--atom-scale", type=float, default=0.3, help="Radius multiplier")
    parser.add_argument(
        "--position-scale", type=float, default=1.0, help="Coordinate multiplier"
    )
    parser.add_argument("--sphere-detail", type=int, default=10, help="Sphere bands")
    parser.add_argument(
        "--bond-threshold",
        type=float,
        default=1.8,
        help="Maximum bond length (Angstroms, exclusive)",
    )
    parser.add_argument("--quiet", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    return parser


class GeometryBuilder:
    """Convert one input at a time and write its arrays to disk."""

    def __init__(self, options: GeometryOptions, mode: str, output_dir: Path, model: Optional[int] = None):
        self._options = options
        self._mode = mode
        self._output_dir = output_dir
        self._model = model
        self._structures = StructureService(options)
        self._geometry = GeometryService()
        self._backbone = BackboneService(options.max_residue_gap)
        self._mesh_parser = PolygonMeshParser()
        self.stats = PerformanceStats()

    def structure_arrays(self, text: str) -> dict:
        with timer("load_structure", self.stats):
            graph = self._structures.load(text, model=self._model)
        logger.info(
            f"{len(graph.atoms)} atoms, {len(graph.bonds)} bonds, "
            f"{graph.fragment_count()} fragments"
        )

        opts = self._options
        with timer(f"build_{self._mode}", self.stats):
            if self._mode == "merged":
                return self._geometry.build_merged(
                    graph,
                    atom_scale=opts.atom_scale,
                    sphere_detail=opts.sphere_detail,
                    bond_radius=opts.bond_radius,
                    bond_segments=opts.bond_segments,
                ).to_arrays()
            if self._mode == "backbone":
                trace = self._backbone.extract_trace(graph.atoms)
                lines = self._backbone.build_geometry(trace, scale=opts.position_scale)
                return {"positions": lines.positions, "colors": lines.colors}
            return self._geometry.build_simple(
                graph, atom_scale=opts.atom_scale, position_scale=opts.position_scale
            ).to_arrays()

    def mesh_arrays(self, text: str) -> dict:
        with timer("parse_mesh", self.stats):
            return self._mesh_parser.parse(text).to_arrays()

    def convert_file(self, path: Path) -> Path:
        text = read_text_file(str(path))
        if path.suffix.lower() == ".obj":
            arrays = self.mesh_arrays(text)
        else:
            arrays = self.structure_arrays(text)
        return self._write(path.stem, arrays)

    def convert_rcsb(self, pdb_id: str) -> Path:
        return self._write(pdb_id.upper(), self.structure_arrays(fetch_rcsb(pdb_id)))

    def _write(self, stem: str, arrays: dict) -> Path:
        output_path = self._output_dir / f"{stem}.npz"
        np.savez(output_path, **arrays)
        logger.info(f"Wrote {output_path}")
        return output_path


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for geometry conversion CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.inputs and not args.rcsb:
        parser.error("no inputs given")

    try:
        options = GeometryOptions(
            atom_scale=args.atom_scale,
            position_scale=args.position_scale,
            sphere_detail=args.sphere_detail,
            bond_threshold=args.bond_threshold,
        )
    except ValueError as e:
        parser.error(str(e))

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    builder = GeometryBuilder(options, args.mode, output_dir, model=args.model)

    jobs = [(str(p), builder.convert_file, Path(p)) for p in args.inputs]
    jobs += [(f"rcsb:{i}", builder.convert_rcsb, i) for i in args.rcsb]

    errors = []
    for label, convert, source in tqdm(jobs, desc="Building geometry", unit="file", disable=args.quiet):
        try:
            convert(source)
        except (GeometryError, OSError) as e:
            logger.error(f"Failed to convert {label}: {e}")
            errors.append(label)

    logger.debug(builder.stats.report())
    if errors:
        logger.error(f"Completed with {len(errors)} errors")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
