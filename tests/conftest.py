"""
Shared fixtures for sotdl-gen tests.
"""

from pathlib import Path

import pytest

from sotdl_gen.database import CharacterDatabase
from sotdl_gen.models import NameList

from rulebook_text import build_rulebook_text


# ─── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture(scope="session")
def rulebook_text() -> str:
    return build_rulebook_text()


@pytest.fixture(scope="session")
def name_table() -> list[NameList]:
    return [
        NameList(ancestry="Human", ethnicity="Caecian", type="Male", names=["Aldric", "Corvin"]),
        NameList(ancestry="Human", ethnicity="Caecian", type="Female", names=["Adela", "Brigid"]),
        NameList(ancestry="Human", ethnicity="Caecian", type="Surname", names=["Thorne", "Marlow"]),
        NameList(ancestry="Goblin", ethnicity="Gutter Goblin", type="Male", names=["Grib"]),
        NameList(ancestry="Goblin", ethnicity="Gutter Goblin", type="Surname", names=["Mudfoot"]),
    ]


@pytest.fixture(scope="session")
def built_database(rulebook_text: str, name_table: list[NameList]) -> CharacterDatabase:
    return CharacterDatabase.from_text(rulebook_text, name_table)


@pytest.fixture
def database(built_database: CharacterDatabase) -> CharacterDatabase:
    """A private copy so tests cannot leak changes into each other."""
    return built_database.model_copy(deep=True)


@pytest.fixture
def fake_pdf(tmp_path: Path) -> Path:
    pdf = tmp_path / "Shadow_of_the_Demon_Lord.pdf"
    pdf.write_bytes(b"%PDF-1.4 placeholder")
    return pdf
