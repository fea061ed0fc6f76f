"""British to American spelling normalization."""

import re
from typing import Dict

# British spelling -> American spelling. Inflected forms are listed
# explicitly; no suffix rules are applied.
GB_TO_US: Dict[str, str] = {
    "aeroplane": "airplane",
    "aeroplanes": "airplanes",
    "aluminium": "aluminum",
    "analyse": "analyze",
    "analysed": "analyzed",
    "analyses": "analyzes",
    "analysing": "analyzing",
    "apologise": "apologize",
    "apologised": "apologized",
    "apologising": "apologizing",
    "armour": "armor",
    "behaviour": "behavior",
    "behaviours": "behaviors",
    "catalogue": "catalog",
    "catalogues": "catalogs",
    "centre": "center",
    "centres": "centers",
    "cheque": "check",
    "cheques": "checks",
    "colour": "color",
    "coloured": "colored",
    "colourful": "colorful",
    "colours": "colors",
    "cosy": "cozy",
    "criticise": "criticize",
    "criticised": "criticized",
    "criticising": "criticizing",
    "defence": "defense",
    "dialogue": "dialog",
    "enrol": "enroll",
    "favour": "favor",
    "favourite": "favorite",
    "favourites": "favorites",
    "favours": "favors",
    "fibre": "fiber",
    "flavour": "flavor",
    "flavours": "flavors",
    "fulfil": "fulfill",
    "grey": "gray",
    "harbour": "harbor",
    "honour": "honor",
    "honoured": "honored",
    "honours": "honors",
    "humour": "humor",
    "jewellery": "jewelry",
    "labour": "labor",
    "licence": "license",
    "litre": "liter",
    "litres": "liters",
    "manoeuvre": "maneuver",
    "metre": "meter",
    "metres": "meters",
    "mum": "mom",
    "mums": "moms",
    "neighbour": "neighbor",
    "neighbours": "neighbors",
    "offence": "offense",
    "organisation": "organization",
    "organisations": "organizations",
    "organise": "organize",
    "organised": "organized",
    "organising": "organizing",
    "programme": "program",
    "programmes": "programs",
    "pyjamas": "pajamas",
    "realise": "realize",
    "realised": "realized",
    "realises": "realizes",
    "realising": "realizing",
    "recognise": "recognize",
    "recognised": "recognized",
    "recognising": "recognizing",
    "rumour": "rumor",
    "rumours": "rumors",
    "savour": "savor",
    "sceptic": "skeptic",
    "sceptical": "skeptical",
    "splendour": "splendor",
    "theatre": "theater",
    "theatres": "theaters",
    "travelled": "traveled",
    "traveller": "traveler",
    "travellers": "travelers",
    "travelling": "traveling",
    "tyre": "tire",
    "tyres": "tires",
    "vapour": "vapor",
    "vigour": "vigor",
}

_GB_RE = re.compile(
    r"\b(" + "|".join(sorted(map(re.escape, GB_TO_US), key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def gb_to_us(text: str) -> str:
    """
    Rewrite British spellings in text to their American equivalents.

    Matching is case-insensitive; replacements are lower-case, which suits
    the already lower-cased input of the analysis pipeline.
    """
    if not text:
        return text
    return _GB_RE.sub(lambda m: GB_TO_US[m.group(0).lower()], text)
