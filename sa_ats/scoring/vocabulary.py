"""Keyword tables and compiled patterns used by the feature detectors.

All tables are lower-case; detectors run against lower-cased text. Terms are
matched as whole words unless noted otherwise. Word boundaries are expressed
with lookarounds so that terms such as ``c++``, ``c#``, ``node.js`` and
``ca(sa)`` behave like ordinary words.
"""

from __future__ import annotations

import re
from typing import Iterable, Pattern


def term_pattern(term: str) -> Pattern[str]:
    """Compile a whole-word pattern for a single term.

    Internal spaces match any run of whitespace so "cape  town" and a term
    wrapped across a line break still count.
    """
    body = r"\s+".join(re.escape(part) for part in term.split())
    return re.compile(rf"(?<!\w){body}(?!\w)")


def compile_terms(terms: Iterable[str]) -> tuple[tuple[str, Pattern[str]], ...]:
    return tuple((term, term_pattern(term)) for term in terms)


# Structural

SECTION_HEADINGS = (
    "education",
    "experience",
    "skills",
    "qualifications",
    "work history",
    "employment",
    "references",
    "personal details",
)

# Plain substring search: headings also count inside "work experience:" etc.
SECTION_RE = re.compile("|".join(re.escape(h) for h in SECTION_HEADINGS))

BULLET_RE = re.compile(r"[•●▪◦■➢✓]|^[ \t]*[-*][ \t]+", re.MULTILINE)

CONTACT_RE = re.compile(
    r"(?<!\w)(?:e-?mail|(?:tele)?phone|tel|mobile|cell(?:\s?phone)?|address|linkedin"
    r"|contact\s+(?:number|details))(?!\w)"
    r"|(?<![\w.+-])[\w.+-]+@[\w-]+\.[\w.-]+"
)

_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\b\.?"
)
_YEAR = r"(?:19|20)\d{2}"
_OPEN_END = r"(?:present|current|date|now)"

# "to date" alone is ordinary prose ("kept skills up to date").
DATE_RANGE_RE = re.compile(
    rf"\b{_MONTH}(?:\s+{_YEAR})?\s*(?:-|–|—|to)\s*(?:{_MONTH}|{_YEAR}|{_OPEN_END})"
    rf"|\b{_YEAR}\s*(?:-|–|—|to)\s*(?:{_YEAR}|{_OPEN_END})\b"
    rf"|\bto\s+(?:{_YEAR}|present|current|now)\b"
)

YEAR_RE = re.compile(rf"\b{_YEAR}\b")


# Content quality

ACTION_VERBS = (
    "managed",
    "developed",
    "created",
    "implemented",
    "led",
    "designed",
    "improved",
    "increased",
    "reduced",
    "achieved",
    "launched",
    "organized",
    "coordinated",
    "established",
    "executed",
    "generated",
    "maintained",
    "negotiated",
    "operated",
    "performed",
    "planned",
    "resolved",
    "supervised",
    "trained",
    "transformed",
    "won",
    "delivered",
    "enabled",
    "guided",
)

ACTION_VERB_RE = re.compile(r"\b(?:" + "|".join(ACTION_VERBS) + r")\b")

QUANTIFIED_RE = re.compile(
    r"(?<![\d.,])\d+(?:[.,]\d+)?\s?%"
    r"|\b\d+(?:[.,]\d+)?\s+percent\b"
    r"|\b(?:increased|decreased|reduced|improved|grew|saved|generated|cut)\b"
    r"[^.\n]{0,40}?\bby\s+r?\$?\d+"
    r"|\b(?:saved|generated|over|more than)\s+r?\$?\d+"
)

KEY_SKILLS = (
    # languages and frameworks
    "javascript",
    "typescript",
    "python",
    "java",
    "c#",
    "c++",
    "php",
    "ruby",
    "react",
    "angular",
    "vue",
    "node.js",
    "express",
    "django",
    "flask",
    "spring",
    "asp.net",
    "html",
    "css",
    "redux",
    "graphql",
    "rest api",
    "soap",
    "microservices",
    # data
    "sql",
    "nosql",
    "mongodb",
    "mysql",
    "postgresql",
    "oracle",
    "data analysis",
    "machine learning",
    "artificial intelligence",
    "power bi",
    # cloud and tooling
    "aws",
    "azure",
    "gcp",
    "cloud",
    "docker",
    "kubernetes",
    "jenkins",
    "git",
    "github",
    "gitlab",
    "terraform",
    "ci/cd",
    "cybersecurity",
    # delivery
    "agile",
    "scrum",
    "kanban",
    "jira",
    "testing",
    "tdd",
    "selenium",
    # business and office
    "sap",
    "crm",
    "erp",
    "excel",
    "microsoft office",
    "accounting",
    "budgeting",
    "forecasting",
    "auditing",
    "risk management",
    "supply chain",
    "procurement",
    # soft skills
    "communication",
    "leadership",
    "teamwork",
    "problem solving",
    "project management",
    "stakeholder management",
    "customer service",
    "negotiation",
    "time management",
)

KEY_SKILL_PATTERNS = compile_terms(KEY_SKILLS)


# Regional context (South Africa)

SA_MARKET_KEYWORDS = (
    "south africa",
    "south african",
    "sa",
    "rsa",
    "republic of south africa",
    "cape town",
    "johannesburg",
    "pretoria",
    "durban",
    "bloemfontein",
    "port elizabeth",
    "gqeberha",
    "east london",
    "pietermaritzburg",
    "polokwane",
    "nelspruit",
    "mbombela",
    "kimberley",
    "rustenburg",
    "soweto",
    "b-bbee",
    "bbbee",
    "bee",
    "nqf",
    "saqa",
    "matric",
    "seta",
    "ieb",
    "unisa",
    "wits",
    "uct",
    "ukzn",
    "uj",
    "ufs",
    "uwc",
    "tut",
    "cput",
    "vut",
    "dut",
    "nmmu",
    "stellenbosch",
    "rhodes",
    "sol plaatje",
    "zulu",
    "isizulu",
    "xhosa",
    "isixhosa",
    "afrikaans",
    "sesotho",
    "setswana",
    "sepedi",
    "venda",
    "tsonga",
    "swazi",
    "ndebele",
)

SA_MARKET_KEYWORD_PATTERNS = compile_terms(SA_MARKET_KEYWORDS)

SA_CERTIFICATIONS = (
    "sacnasp",
    "ecsa",
    "saica",
    "saipa",
    "ca(sa)",
    "iacsa",
    "cisa",
    "acca",
    "cima",
    "cia",
    "cfa",
    "fpi",
    "sabpp",
    "pmsa",
    "saiee",
    "cssa",
    "icsa",
    "pmi-sa",
    "isaca",
    "iitpsa",
    "saia",
    "asaqs",
    "sacpcmp",
    "sacap",
    "saci",
    "ilasa",
    "saiw",
    "plato",
    "hpcsa",
    "sanc",
    "sapc",
    "sama",
    "sacssp",
    "sabs",
    "nrcs",
    "sanas",
)

SA_CERTIFICATION_PATTERNS = compile_terms(SA_CERTIFICATIONS)

BBBEE_RE = re.compile(
    r"(?<!\w)(?:b-?bbee|bbbee|bee|broad[\s-]based black economic empowerment"
    r"|black economic empowerment|previously disadvantaged|employment equity"
    r"|affirmative action)(?!\w)"
)

NQF_RE = re.compile(
    r"\bnqf\s*(?:level\s*)?\d{1,2}\b"
    r"|\bnational qualifications?\s+framework\b"
    r"|\bsaqa\b"
)

SA_LOCATIONS = (
    "south africa",
    "gauteng",
    "western cape",
    "eastern cape",
    "northern cape",
    "kwazulu-natal",
    "kwazulu natal",
    "kzn",
    "free state",
    "north west",
    "limpopo",
    "mpumalanga",
    "johannesburg",
    "cape town",
    "durban",
    "pretoria",
    "tshwane",
    "ekurhuleni",
    "gqeberha",
    "port elizabeth",
    "bloemfontein",
)

SA_LOCATION_PATTERNS = compile_terms(SA_LOCATIONS)

SA_LANGUAGES = (
    "afrikaans",
    "zulu",
    "isizulu",
    "xhosa",
    "isixhosa",
    "sotho",
    "sesotho",
    "northern sotho",
    "sepedi",
    "tswana",
    "setswana",
    "venda",
    "tshivenda",
    "tsonga",
    "xitsonga",
    "swati",
    "siswati",
    "swazi",
    "ndebele",
    "isindebele",
)

SA_LANGUAGE_PATTERNS = compile_terms(SA_LANGUAGES)
