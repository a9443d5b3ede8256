"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from eu4data.config import Config


# =============================================================================
# PATH FIXTURES
# =============================================================================

@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def game_dir(fixtures_dir):
    """Path to the miniature game installation."""
    return fixtures_dir / "game"


@pytest.fixture
def provinces_dir(game_dir):
    """Path to province history fixtures."""
    return game_dir / "history" / "provinces"


@pytest.fixture
def countries_dir(game_dir):
    """Path to country definition fixtures."""
    return game_dir / "common" / "countries"


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def config(game_dir, tmp_path):
    """Config pointing at the fixture game and a scratch target folder."""
    return Config(
        mod_name="Test Mod",
        target_path=tmp_path / "target",
        game_path=game_dir,
    )


@pytest.fixture
def config_file(game_dir, tmp_path):
    """A Config.toml on disk pointing at the fixture game."""
    path = tmp_path / "Config.toml"
    path.write_text(
        'mod_name = "Test Mod"\n'
        f'target_path = "{(tmp_path / "target").as_posix()}"\n'
        f'game_path = "{game_dir.as_posix()}"\n',
        encoding="utf-8",
    )
    return path


# =============================================================================
# SOURCE FIXTURES
# =============================================================================

@pytest.fixture
def province_source():
    """A typical province history file."""
    return '''
    # 1 - Uppland
    owner = SWE
    controller = SWE
    add_core = SWE
    culture = swedish
    religion = catholic
    base_tax = 5
    capital = "Stockholm"
    discovered_by = { eastern western muslim ottoman }

    1444.11.11 = {
        controller = DAN
        add_claim = DAN
    }
    1523.6.6 = { religion = protestant }
    '''
