"""
Structured Comprehensive Rules models.

Classes:
- Subrule: lettered clause, e.g. 100.1a
- Rule: numbered rule with its subrules, e.g. 100.1
- Subcategory: three-digit section with its rules, e.g. 100. General
- Category: single-digit chapter with its subcategories, e.g. 1. Game Concepts
- GlossaryTerm: a glossary entry and its definition paragraphs
- RulesDocument: the whole parsed ruleset

Every model is frozen: fields cannot be reassigned once built. Child lists are
filled in document order by the parsers and are not meant to be touched
afterwards; RulesDocument holds its categories and terms as tuples.

Field names match the JSON served to consumers, so `model_dump(by_alias=True)`
yields the wire format directly.
"""
from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field


class Subrule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    rule: str


class Rule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    rule: str
    subrules: list[Subrule] = Field(default_factory=list)


class Subcategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    rules: list[Rule] = Field(default_factory=list)

    def find_rule(self, rule_id: str) -> Rule | None:
        return next((rule for rule in self.rules if rule.id == rule_id), None)


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    subcategories: list[Subcategory] = Field(default_factory=list)

    def find_subcategory(self, subcategory_id: str) -> Subcategory | None:
        return next((sub for sub in self.subcategories if sub.id == subcategory_id), None)


class GlossaryTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    meanings: list[str] = Field(default_factory=list)


class RulesDocument(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rules: tuple[Category, ...]
    glossary: tuple[GlossaryTerm, ...]
    # Epoch milliseconds, midnight UTC of the effective date
    effective_date: int = Field(alias="effectiveDate")

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_json_dict(), indent=indent, ensure_ascii=False)
