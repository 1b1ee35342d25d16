"""Voting services - address derivation, state reads and submission."""

from app.services.voting.addresses import (
    DEFAULT_PROGRAM_ID,
    derive_vote_addresses,
    derive_vote_count_address,
    derive_voted_flag_address,
    parse_address,
)
from app.services.voting.state import VoteStateReader, decode_tally
from app.services.voting.submitter import (
    CONFIRMATION_LEVEL,
    VoteSubmitter,
    build_vote_instruction,
    build_vote_transaction,
)

__all__ = [
    # Addresses
    "DEFAULT_PROGRAM_ID",
    "parse_address",
    "derive_vote_count_address",
    "derive_voted_flag_address",
    "derive_vote_addresses",
    # State
    "VoteStateReader",
    "decode_tally",
    # Submission
    "CONFIRMATION_LEVEL",
    "VoteSubmitter",
    "build_vote_instruction",
    "build_vote_transaction",
]
