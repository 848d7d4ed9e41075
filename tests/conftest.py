# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures and the YAML vector loader for the zip321 test suite."""

from functools import cache
from pathlib import Path
from typing import Any

import pytest
import yaml

from zip321 import ParserContext, RecipientAddress

# ###############
# Test Vectors
# ###############

VECTORS_FILE = Path(__file__).parent / "data" / "zip321_vectors.yaml"

TESTNET_SAPLING = "ztestsapling10yy2ex5dcqkclhc7z7yrnjq2z6feyjad56ptwlfgmy77dmaqqrl9gyhprdx59qgmsnyfska2kez"
TESTNET_TRANSPARENT = "tmEZhbWHTpdKMw5it8YDspUXSMGQyFwovpU"
MAINNET_UNIFIED = (
    "u1fl5mprj0t9p4jg92hjjy8q5myvwc60c9wv0xachauqpn3c3k4xwzlaueafq27dcg7tzzzaz5jl8tyj93wgs983y0jq0qfhzu6n4r8rakpv5f4"
    "gg2lrw4z6pyqqcrcqx04d38yunc6je"
)


@cache
def load_vectors() -> dict[str, list[dict[str, Any]]]:
    """Load the URI vectors shared by the parser and renderer suites."""
    with VECTORS_FILE.open(encoding="utf-8") as stream:
        return yaml.safe_load(stream)


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``valid_vector`` and ``invalid_vector`` arguments from the YAML file."""
    for argname, section in (("valid_vector", "valid"), ("invalid_vector", "invalid")):
        if argname in metafunc.fixturenames:
            cases = load_vectors()[section]
            metafunc.parametrize(argname, cases, ids=[case["name"] for case in cases])


# ###############
# Fixtures
# ###############


@pytest.fixture
def sapling_address() -> RecipientAddress:
    return RecipientAddress(value=TESTNET_SAPLING, network=ParserContext.TESTNET)


@pytest.fixture
def transparent_address() -> RecipientAddress:
    return RecipientAddress(value=TESTNET_TRANSPARENT, network=ParserContext.TESTNET)


@pytest.fixture
def mainnet_address() -> RecipientAddress:
    return RecipientAddress(value=MAINNET_UNIFIED, network=ParserContext.MAINNET)
