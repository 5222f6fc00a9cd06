"""Personal-attribute wordlist generator and password policy checks."""

from .generator import (
    PAIR_TOKEN_LIMIT,
    SUFFIXES,
    CandidateSet,
    augment,
    combine_pairs,
    generate_and_store,
    generate_password_list,
    leet_bang,
)
from .policy import PolicyConfig, build_rules, describe_rules, evaluate_rules
from .storage import STORAGE_KEY, JsonFileStore, KeyValueStore, MemoryStore, load_wordlist, save_wordlist
from .tokenizer import PROFILE_FIELDS, tokenize
from .variations import VariationOptions, expand, leet

__version__ = "0.1.0"
