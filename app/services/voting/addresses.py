"""Derived addresses for vote tallies and voted flags.

Both addresses are program derived addresses (PDAs): a fixed namespace tag
plus the canonical 32-byte form of each identifier, hashed against the owning
program id. Pure functions, no I/O.
"""

from solders.pubkey import Pubkey

from app.errors import InvalidAddressFormat
from app.models import VoteAddresses
from settings import PROGRAM_ID

VOTE_COUNT_SEED = b"vote_count"
VOTED_SEED = b"voted"

DEFAULT_PROGRAM_ID = Pubkey.from_string(PROGRAM_ID)


def parse_address(value: str | Pubkey) -> Pubkey:
    """Parse a base58 address. Anything else is rejected, never coerced."""
    if isinstance(value, Pubkey):
        return value
    if not isinstance(value, str) or not value:
        raise InvalidAddressFormat(value)
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidAddressFormat(value) from e


def derive_vote_count_address(contract: str | Pubkey, program_id: Pubkey = DEFAULT_PROGRAM_ID) -> Pubkey:
    """PDA holding the u64 vote tally for a contract."""
    seeds = [VOTE_COUNT_SEED, bytes(parse_address(contract))]
    address, _bump = Pubkey.find_program_address(seeds, program_id)
    return address


def derive_voted_flag_address(
    voter: str | Pubkey,
    contract: str | Pubkey,
    program_id: Pubkey = DEFAULT_PROGRAM_ID,
) -> Pubkey:
    """PDA whose existence marks that `voter` voted on `contract`."""
    seeds = [VOTED_SEED, bytes(parse_address(voter)), bytes(parse_address(contract))]
    address, _bump = Pubkey.find_program_address(seeds, program_id)
    return address


def derive_vote_addresses(
    voter: str | Pubkey,
    contract: str | Pubkey,
    program_id: Pubkey = DEFAULT_PROGRAM_ID,
) -> VoteAddresses:
    return VoteAddresses(
        vote_count=derive_vote_count_address(contract, program_id),
        voted_flag=derive_voted_flag_address(voter, contract, program_id),
    )
