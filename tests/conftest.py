import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_validator.registry.entities import Family, Individual  # noqa: E402

# Validation tests run against a fixed "now"
TODAY = date(2020, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def person():
    """
    Factory for Individuals with sensible defaults.

    A person without explicit family links gets ``famc="F0"``, a family id
    no test defines, so the record stays constructible.
    """

    def make(iid, name="Joe /Smith/", sex="M", birth=date(1950, 1, 1), death=None, famc=None, fams=()):
        fams = list(fams)
        if famc is None and not fams:
            famc = "F0"
        return Individual(id=iid, name=name, sex=sex, birth=birth, death=death, famc=famc, fams=fams)

    return make


@pytest.fixture
def family():
    def make(fid, hid="I1", wid="I2", cids=(), marriage=date(1975, 1, 1), divorce=None):
        return Family(id=fid, hid=hid, wid=wid, cids=list(cids), marriage=marriage, divorce=divorce)

    return make


@pytest.fixture
def relation_of(today):
    """Build a Relation from lists of records, keyed by id in list order."""
    from gedcom_validator.validation.model import Relation

    def make(indi=(), fami=(), now=None):
        return Relation(
            indi={i.id: i for i in indi},
            fami={f.id: f for f in fami},
            today=now or today,
        )

    return make
