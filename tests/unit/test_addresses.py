"""Tests for vote address derivation."""

import pytest
from solders.pubkey import Pubkey

from app.errors import InvalidAddressFormat
from app.services.voting import (
    DEFAULT_PROGRAM_ID,
    derive_vote_addresses,
    derive_vote_count_address,
    derive_voted_flag_address,
    parse_address,
)

TOKEN = "73UdJevxaNKXARgkvPHQGKuv8HCZARszuKW2LTL3pump"
VOTER = "So11111111111111111111111111111111111111112"


class TestParseAddress:
    def test_base58_string(self):
        assert str(parse_address(TOKEN)) == TOKEN

    def test_pubkey_passthrough(self):
        key = Pubkey.new_unique()
        assert parse_address(key) is key

    @pytest.mark.parametrize("value", ["", "TOKEN1", "0OIl", TOKEN + "abc", f" {TOKEN}", None, 42, b"x" * 32])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidAddressFormat):
            parse_address(value)


class TestDerivation:
    def test_vote_count_deterministic(self):
        assert derive_vote_count_address(TOKEN) == derive_vote_count_address(TOKEN)
        assert bytes(derive_vote_count_address(TOKEN)) == bytes(derive_vote_count_address(Pubkey.from_string(TOKEN)))

    def test_voted_flag_deterministic(self):
        assert derive_voted_flag_address(VOTER, TOKEN) == derive_voted_flag_address(VOTER, TOKEN)

    def test_matches_seed_scheme(self):
        token = Pubkey.from_string(TOKEN)
        voter = Pubkey.from_string(VOTER)
        count, _ = Pubkey.find_program_address([b"vote_count", bytes(token)], DEFAULT_PROGRAM_ID)
        flag, _ = Pubkey.find_program_address([b"voted", bytes(voter), bytes(token)], DEFAULT_PROGRAM_ID)
        assert derive_vote_count_address(token) == count
        assert derive_voted_flag_address(voter, token) == flag

    def test_count_and_flag_distinct(self):
        for _ in range(5):
            voter, contract = Pubkey.new_unique(), Pubkey.new_unique()
            assert derive_vote_count_address(contract) != derive_voted_flag_address(voter, contract)

    def test_flag_depends_on_voter(self):
        a, b = Pubkey.new_unique(), Pubkey.new_unique()
        assert derive_voted_flag_address(a, TOKEN) != derive_voted_flag_address(b, TOKEN)

    def test_flag_argument_order_matters(self):
        a, b = Pubkey.new_unique(), Pubkey.new_unique()
        assert derive_voted_flag_address(a, b) != derive_voted_flag_address(b, a)

    def test_program_id_changes_address(self):
        other_program = Pubkey.new_unique()
        assert derive_vote_count_address(TOKEN) != derive_vote_count_address(TOKEN, other_program)

    def test_bundle(self):
        addresses = derive_vote_addresses(VOTER, TOKEN)
        assert addresses.vote_count == derive_vote_count_address(TOKEN)
        assert addresses.voted_flag == derive_voted_flag_address(VOTER, TOKEN)

    def test_invalid_contract(self):
        with pytest.raises(InvalidAddressFormat):
            derive_vote_count_address("not-an-address")

    def test_invalid_voter(self):
        with pytest.raises(InvalidAddressFormat):
            derive_voted_flag_address("nope", TOKEN)
