"""Profile fields and the splitter that turns them into tokens."""

import logging
import re
from typing import Dict, List, Mapping, Optional, Tuple


logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3
TOKEN_SEPARATORS = re.compile(r"[\s,._-]+")

PROFILE_FIELDS: List[Tuple[str, str]] = [
    ("first_name", "Identity: first name (e.g., Jane)"),
    ("middle_name", "Identity: middle name (e.g., Alex)"),
    ("last_name", "Identity: last name (e.g., Doe)"),
    ("nickname", "Identity: nicknames (e.g., janey, jd)"),
    ("maiden_name", "Identity: maiden name (e.g., Smith)"),
    ("partner_name", "Family: partner name (e.g., Sam)"),
    ("children_names", "Family: children names (e.g., Lily, Max)"),
    ("parent_names", "Family: parent names (e.g., Robert, Anna)"),
    ("sibling_names", "Family: sibling names (e.g., Chris)"),
    ("pet_names", "Family: pet names (e.g., Tiger, Biscuit)"),
    ("birth_date", "Dates: date of birth (e.g., 14-02-1990)"),
    ("partner_birth_date", "Dates: partner date of birth (e.g., 03-07-1988)"),
    ("anniversary", "Dates: anniversary (e.g., 2015-06-20)"),
    ("children_birth_dates", "Dates: children dates of birth (e.g., 2012-09-01)"),
    ("street", "Address: street name (e.g., Maple Avenue)"),
    ("city", "Address: city (e.g., Springfield)"),
    ("birthplace", "Address: birthplace (e.g., Portland)"),
    ("country", "Address: country (e.g., Canada)"),
    ("postal_code", "Address: postal code (e.g., 12345)"),
    ("company", "Career: company or workplace (e.g., Initech)"),
    ("job_title", "Career: job title (e.g., engineer)"),
    ("school", "Career: school or university (e.g., Westfield High)"),
    ("hobbies", "Interests: hobbies (e.g., climbing, chess)"),
    ("sports_teams", "Interests: sports teams (e.g., Lakers)"),
    ("favorite_bands", "Interests: music artists or bands (e.g., Queen)"),
    ("favorite_movies", "Interests: movies or series (e.g., Matrix)"),
    ("favorite_food", "Interests: favorite food (e.g., pizza)"),
    ("favorite_color", "Interests: favorite color (e.g., purple)"),
    ("car", "Interests: car make/model (e.g., Mustang)"),
    ("username", "Digital: usernames (e.g., jane_doe90)"),
    ("email_handle", "Digital: email handle (e.g., jdoe.work)"),
    ("gamertag", "Digital: gamertags (e.g., frag-master)"),
    ("keywords", "Digital: other words or phrases (e.g., projectx)"),
]


def field_key(name: str) -> str:
    """Fold a field name so firstName, first_name and first-name match."""
    return re.sub(r"[\s_-]+", "", name).lower()


_FIELD_RANK: Dict[str, int] = {field_key(name): idx for idx, (name, _) in enumerate(PROFILE_FIELDS)}


def ordered_values(record: Mapping[str, Optional[str]]) -> List[str]:
    """Non-empty string values in canonical field order.

    Known fields come first in PROFILE_FIELDS order, then unknown fields
    sorted by name, so the result does not depend on insertion order.
    """
    unknown_rank = len(PROFILE_FIELDS)

    def rank(name: object) -> Tuple[int, str, str]:
        key = field_key(str(name))
        return (_FIELD_RANK.get(key, unknown_rank), key, str(name))

    values = []
    for name in sorted(record, key=rank):
        value = record[name]
        if isinstance(value, str) and value:
            values.append(value)
    return values


def split_value(value: str) -> List[str]:
    return [part for part in TOKEN_SEPARATORS.split(value) if len(part) >= MIN_TOKEN_LENGTH]


def tokenize(record: Mapping[str, Optional[str]]) -> List[str]:
    tokens: List[str] = []
    for value in ordered_values(record):
        tokens.extend(split_value(value))
    logger.debug("Tokenized %d field(s) into %d token(s)", len(record), len(tokens))
    return tokens
