"""
Sector classification from the job title.

SECTOR_KEYWORDS is ordered: the first sector with a matching keyword wins.
Keywords of three characters or fewer ("qa", "hr", "ai") must match a whole
title token; longer keywords match anywhere in the lower-cased title.
"""

import re
from typing import Dict, List, Optional, Set, Tuple

SHORT_KEYWORD_LENGTH = 3

SECTOR_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Technology / Engineering": (
        "developer", "engineer", "sde", "software", "programmer", "full stack",
        "fullstack", "frontend", "front end", "backend", "back end", "devops",
        "sre", "qa", "quality assurance", "testing", "automation engineer",
        "test engineer", "mobile", "android", "ios", "flutter", "react",
        "react native", "angular", "vue", "node", "java", "python", "c++", "c#",
        ".net", "php", "ruby", "go", "golang", "swift", "javascript",
        "typescript", "cybersecurity", "security engineer", "ethical hacker",
        "penetration tester", "blockchain", "web3", "smart contract", "solidity",
        "embedded", "firmware", "iot", "cloud engineer", "aws", "azure", "gcp",
        "data engineer", "data analyst", "data scientist", "ml",
        "machine learning", "ai", "deep learning", "nlp", "computer vision",
        "big data", "hadoop", "spark", "kubernetes", "docker",
        "site reliability engineer", "infrastructure engineer",
        "platform engineer", "system architect", "application architect",
        "solutions architect", "integration engineer", "build engineer",
        "release engineer", "game developer", "unreal engine",
    ),
    "Product & Design": (
        "designer", "design", "ux", "ui", "ux/ui", "ui/ux", "product",
        "product manager", "product owner", "creative", "visual", "graphic",
        "ux writer", "content designer", "game designer", "web designer",
        "interaction designer", "experience architect", "service designer",
        "illustrator", "brand strategist", "art director", "motion designer",
        "3d designer", "3d artist", "creative director", "design research",
        "researcher", "product strategist", "user researcher",
        "usability analyst", "information architect", "storyboard artist",
        "animation designer", "concept artist", "colorist", "digital artist",
        "industrial designer",
    ),
    "Marketing & Growth": (
        "marketing", "growth", "growth hacker", "digital", "digital marketing",
        "seo", "search engine optimization", "content", "content strategist",
        "copywriter", "copywriting", "social", "social media",
        "community manager", "brand", "brand manager", "branding", "campaign",
        "email marketing", "marketing automation", "crm marketing",
        "performance marketing", "paid marketing", "paid social",
        "paid search", "ppc", "sem", "search engine marketing",
        "display advertising", "programmatic advertising",
        "affiliate marketing", "influencer marketing", "event marketing",
        "product marketing", "go-to-market", "market research",
        "marketing analytics", "analytics", "conversion rate optimization",
        "cro", "app store optimization", "aso",
    ),
    "Sales & Business Development": (
        "sales", "business development", "business",
        "account executive", "account manager", "key account manager",
        "revenue", "partnership", "partnerships", "alliances manager",
        "channel sales", "channel partner", "client", "client partner",
        "customer success", "b2b", "b2c", "enterprise sales", "inside sales",
        "field sales", "regional sales", "territory sales", "solution sales",
        "pre-sales", "presales", "sales engineer", "sales operations",
        "sales enablement", "sales development", "sdr", "bdr",
        "lead generation", "lead gen",
    ),
    "Finance & Legal": (
        "finance", "financial", "accounting", "accountant", "accounts",
        "bookkeeping", "bookkeeper", "fp&a", "audit", "auditor", "tax",
        "taxation", "gst", "actuarial", "pricing", "valuation", "treasury",
        "cash management", "payroll", "budget", "budgeting", "forecasting",
        "cost accounting", "investment", "portfolio manager",
        "equity research", "fund manager", "mutual funds", "private equity",
        "venture capital", "vc", "hedge fund", "asset management",
        "investment banking", "strategy", "risk", "credit risk", "fraud",
        "collections", "underwriter", "loan officer", "legal", "lawyer",
        "attorney", "counsel", "corporate law", "paralegal", "compliance",
        "regulatory", "litigation", "arbitration", "contract manager",
        "intellectual property", "patent", "trademark", "company secretary",
        "cs", "corporate governance", "policy", "ethics",
        "anti-money laundering", "aml", "kyc",
    ),
    "Human Resources": (
        "hr", "human resource", "people", "people operations", "people ops",
        "people partner", "hrbp", "chief people officer", "cpo", "personnel",
        "recruitment", "recruiter", "recruiting", "talent", "ta",
        "sourcing specialist", "headhunter", "staffing", "resource manager",
        "resourcing", "manpower planning", "training", "trainer", "learning",
        "l&d", "employee development", "onboarding", "orientation",
        "employee engagement", "employee relations", "er",
        "workforce planning", "organizational development", "od",
        "culture manager", "diversity and inclusion", "d&i",
        "compensation and benefits", "comp & ben", "hr analytics",
    ),
    "Operations": (
        "operations", "operational", "ops", "bizops", "fleet", "supervisor",
        "team lead", "coordinator", "general manager", "plant manager",
        "factory manager", "logistics", "process", "workflow", "efficiency",
        "planning", "production planning", "inventory", "supply chain",
        "supply planning", "warehousing", "warehouse", "procurement",
        "purchasing", "vendor", "materials manager", "quality control", "qc",
        "program operations", "project operations",
    ),
    "Support & Customer Experience": (
        "support", "customer service", "customer support", "client service",
        "client support", "helpdesk", "help desk", "call center",
        "call centre", "bpo", "service desk", "service representative",
        "technical support", "tech support", "customer care",
        "customer experience", "cx", "customer relations",
        "client relations", "relationship manager", "after sales",
        "post sales", "support specialist", "support engineer",
        "service manager",
    ),
}

_TOKEN_SPLIT = re.compile(r"[^a-z0-9+#&.]+")


def _tokenize(title: str) -> Set[str]:
    return {t.strip(".") for t in _TOKEN_SPLIT.split(title) if t.strip(".")}


def _keyword_matches(keyword: str, title: str, tokens: Set[str]) -> bool:
    if len(keyword) <= SHORT_KEYWORD_LENGTH:
        return keyword in tokens
    return keyword in title


def classify_sector(title: Optional[str]) -> List[str]:
    """
    At most one sector for the title, as a list; empty when nothing matches.
    """
    if not title or not isinstance(title, str):
        return []

    lowered = title.lower()
    tokens = _tokenize(lowered)
    for sector, keywords in SECTOR_KEYWORDS.items():
        if any(_keyword_matches(k, lowered, tokens) for k in keywords):
            return [sector]
    return []
