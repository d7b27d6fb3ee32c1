import pytest

from hashhunt.errors import PortfolioValidationError
from hashhunt.services.address import (
    is_valid_chain_id,
    is_valid_wallet_address,
    parse_int_param,
    require_chain_id,
    require_wallet_address,
)
from hashhunt.services.chains import ChainRegistry


def test_address_validation_evm():
    address = "0x1234567890abcdef1234567890ABCDEF12345678"
    assert is_valid_wallet_address(address) is True
    assert is_valid_wallet_address(address[:-1]) is False
    assert is_valid_wallet_address("0xZZZZ567890abcdef1234567890ABCDEF12345678") is False
    assert is_valid_wallet_address(None) is False
    assert is_valid_wallet_address(address + "0") is False


def test_require_wallet_address_raises_validation_error():
    with pytest.raises(PortfolioValidationError) as excinfo:
        require_wallet_address("not-an-address")
    assert excinfo.value.message == "Invalid wallet address format"


def test_chain_id_must_be_positive_int():
    assert is_valid_chain_id(1) is True
    assert is_valid_chain_id(0) is False
    assert is_valid_chain_id(-5) is False
    assert is_valid_chain_id(True) is False
    assert is_valid_chain_id("1") is False
    with pytest.raises(PortfolioValidationError):
        require_chain_id(0)


def test_parse_int_param():
    assert parse_int_param(None) is None
    assert parse_int_param(" 137 ") == 137
    assert parse_int_param("abc") is None
    assert parse_int_param("1.5") is None


def test_chain_registry_filters_enabled_ids_in_configured_order():
    registry = ChainRegistry(enabled_ids=[137, 1])

    assert [chain.id for chain in registry.list_enabled()] == [1, 137]
    assert registry.name_for(137) == "Polygon"
    assert registry.name_for(8453) is None


def test_chain_registry_defaults_to_all_chains():
    ids = [chain.id for chain in ChainRegistry().list_enabled()]
    assert ids == [1, 42161, 43114, 56, 100, 10, 137, 8453]
