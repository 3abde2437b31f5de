"""
Unit tests for skill extraction against the controlled vocabulary.
"""

import pytest

from harvest.enrichment.skills import derive_terms, extract_skills
from harvest.enrichment.vocabulary import SKILLS


class TestDeriveTerms:
    def test_parenthetical_expands_to_base_and_abbreviation(self):
        assert derive_terms("Natural Language Processing (NLP)") == [
            "natural language processing (nlp)",
            "natural language processing",
            "nlp",
        ]

    def test_slash_separated_halves(self):
        assert derive_terms("OKRs / KPIs") == ["okrs / kpis", "okrs", "kpis"]

    def test_short_abbreviation_is_not_a_term(self):
        assert "ha" not in derive_terms("High Availability (HA)")

    def test_comma_list_in_parenthesis_is_not_split(self):
        terms = derive_terms("ELK Stack (Elasticsearch, Logstash, Kibana)")
        assert terms == ["elk stack (elasticsearch, logstash, kibana)", "elk stack"]


class TestExtractSkills:
    def test_stack_from_description(self):
        skills = extract_skills("3-5 years experience in React, Node.js")
        assert "React" in skills
        assert "Node.js" in skills

    def test_dotted_name_does_not_leak_its_suffix(self):
        skills = extract_skills("Experience with Node.js")
        assert "JavaScript" not in skills

    def test_case_insensitive_and_canonical_spelling(self):
        skills = extract_skills("we run POSTGRESQL and kubernetes")
        assert "PostgreSQL" in skills
        assert "Kubernetes" in skills

    def test_alias_maps_to_canonical(self):
        skills = extract_skills("k8s clusters backed by postgres")
        assert "Kubernetes" in skills
        assert "PostgreSQL" in skills

    def test_alias_with_two_targets(self):
        skills = extract_skills("Strong UI/UX sense")
        assert "User Interface (UI)" in skills
        assert "User Experience (UX)" in skills

    def test_abbreviation_from_parenthetical(self):
        assert "Natural Language Processing (NLP)" in extract_skills("Hands-on NLP work")

    def test_morphological_variant(self):
        assert "Unit Testing" in extract_skills("You will write unit tests for every feature")

    def test_no_partial_word_match(self):
        skills = extract_skills("Javanese translation services")
        assert "Java" not in skills

    def test_punctuated_skill_names(self):
        skills = extract_skills("Modern C++ and C# on .NET")
        assert "C++" in skills
        assert "C#" in skills
        assert ".NET" in skills

    @pytest.mark.parametrize("text", ["We go the extra mile", "Go-getter attitude", "go to market"])
    def test_go_needs_an_explicit_mention(self, text):
        assert "Go" not in extract_skills(text)

    @pytest.mark.parametrize("text", ["Golang microservices", "Go language experience", "go lang"])
    def test_go_with_explicit_mention(self, text):
        assert "Go" in extract_skills(text)

    def test_no_duplicates_and_vocabulary_order(self):
        skills = extract_skills("Python python PYTHON, docker and Python again, then Java")
        assert len(skills) == len(set(skills))
        order = [SKILLS.index(s) for s in skills]
        assert order == sorted(order)

    @pytest.mark.parametrize("text", [None, "", 123])
    def test_empty_input(self, text):
        assert extract_skills(text) == []
