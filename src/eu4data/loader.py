"""
Game data loading.

Parses whole data directories of a game installation and prepares the
output folder for a generated mod.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from eu4data.config import Config
from eu4data.errors import DataFileError
from eu4data.files import DEFAULT_ENCODING, parse_file
from eu4data.parser import Table

logger = logging.getLogger(__name__)

PROVINCES_DIR = Path("history") / "provinces"
COUNTRIES_DIR = Path("common") / "countries"


@dataclass
class DataFile:
    """A parsed data file and where it came from."""
    path: Path
    table: Table

    @property
    def name(self) -> str:
        return self.path.name


def load_directory(
    directory: Union[str, Path],
    encoding: str = DEFAULT_ENCODING,
    strict: bool = False,
) -> List[DataFile]:
    """
    Parse every file in a directory, in file name order.

    Raises:
        DataFileError: the directory is missing, or any file fails to parse
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DataFileError(directory, "is not an existing directory")

    files = sorted(p for p in directory.iterdir() if p.is_file())
    logger.debug(f"Found {len(files)} files in {directory}")

    return [DataFile(path, parse_file(path, encoding, strict)) for path in files]


def load_provinces(config: Config) -> List[DataFile]:
    """Load province history files."""
    logger.info("Loading provinces...")
    provinces = load_directory(config.game_path / PROVINCES_DIR, config.encoding, config.strict)
    logger.info(f"Loaded {len(provinces)} provinces")
    return provinces


def load_countries(config: Config) -> List[DataFile]:
    """Load country definition files."""
    logger.info("Loading countries...")
    countries = load_directory(config.game_path / COUNTRIES_DIR, config.encoding, config.strict)
    logger.info(f"Loaded {len(countries)} countries")
    return countries


def prepare_output(config: Config) -> Path:
    """Delete a stale mod folder at the target path and create a fresh one."""
    target = config.target_path
    logger.info(f"Preparing mod folder at \"{target}\"...")

    try:
        if target.is_dir():
            logger.info("Target already exists, deleting stale...")
            shutil.rmtree(target)
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DataFileError(target, f"Cannot prepare output folder: {e}") from e
    return target
