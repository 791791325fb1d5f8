"""
Pytest configuration and shared fixtures.
"""
import pytest

from maras.filtering import adapt_rules
from maras.representation import ClosureLattice, Item, RawRule


@pytest.fixture
def aspirin():
    return Item.drug(1)


@pytest.fixture
def warfarin():
    return Item.drug(2)


@pytest.fixture
def ibuprofen():
    return Item.drug(3)


@pytest.fixture
def bleeding():
    return Item.reaction(10)


@pytest.fixture
def nausea():
    return Item.reaction(11)


@pytest.fixture
def raw_rules():
    """Raw rules as a miner would emit them (drugs > 0, reactions < 0)."""
    return [
        # aspirin + warfarin => bleeding
        RawRule([1, 2], [-10], coverage=0.1, absolute_support=12, confidence=0.8, lift=3.2),
        # aspirin => nausea
        RawRule([1], [-11], coverage=0.3, absolute_support=40, confidence=0.5, lift=1.1),
        # aspirin + nausea => bleeding
        RawRule([1, -11], [-10], coverage=0.05, absolute_support=6, confidence=0.6, lift=2.0),
        # aspirin + warfarin + ibuprofen => bleeding
        RawRule([1, 2, 3], [-10], coverage=0.02, absolute_support=3, confidence=0.9, lift=4.5),
        # aspirin + warfarin => ibuprofen
        RawRule([1, 2], [3], coverage=0.1, absolute_support=7, confidence=0.4, lift=1.3),
        # aspirin + warfarin => bleeding + nausea
        RawRule([1, 2], [-10, -11], coverage=0.1, absolute_support=4, confidence=0.3, lift=2.7),
    ]


@pytest.fixture
def rules(raw_rules):
    """Adapted rule collection built from ``raw_rules``."""
    return adapt_rules("Mined Rules", raw_rules)


@pytest.fixture
def closures():
    """Closed itemsets up to size 3 (levels 0-3)."""
    return ClosureLattice.from_itemsets([
        [Item(1), Item(-11)],
        [Item(1), Item(2), Item(-10)],
        [Item(1), Item(-11), Item(-10)],
    ])


@pytest.fixture
def config_file(tmp_path):
    """Valid pipeline configuration written to a temporary file."""
    path = tmp_path / "pipeline.json"
    path.write_text(
        '{"name": "Test pipeline", "steps": ["drug_reaction", "no_complex"], '
        '"policy": {"min_antecedent_items": 2, "max_antecedent_items": 2, '
        '"max_consequent_items": 1}}',
        encoding='utf-8'
    )
    return path


# Pytest markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
