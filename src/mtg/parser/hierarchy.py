"""
Rebuild the Category -> Subcategory -> Rule -> Subrule tree from rule lines.

Each line is matched against the four patterns in order; the first match wins
and anything else (page headers, blank lines, stray prose) is skipped. The
current parent at each level is tracked by id, so a header that shows up a
second time points the cursor back at the existing branch instead of opening
a new one. A repeated header keeps the title it was first seen with.

Ids encode their ancestry (rule 117.1 lives in subcategory 117, which lives in
category 1), so a line whose id does not extend the current parent's id is
rejected rather than filed under the wrong branch.
"""
from __future__ import annotations

import re

from src.mtg.errors import OrphanLineError
from src.mtg.models.rules import Category, Rule, Subcategory, Subrule

CATEGORY_RE = re.compile(r"^(\d)\. ([A-Z].*)$")
SUBCATEGORY_RE = re.compile(r"^(\d\d+)\. (\S.*)$")
RULE_RE = re.compile(r"^(\d\d+\.\d+)\. (.+)$")
SUBRULE_RE = re.compile(r"^(\d\d+\.\d+[a-z]) (.+)$")


def _find_by_id(items: list, item_id: str):
    return next(item for item in items if item.id == item_id)


def parse_rules(lines: list[str]) -> list[Category]:
    """Parse the rules body into categories in document order."""
    categories: list[Category] = []
    category: Category | None = None
    subcategory: Subcategory | None = None
    rule: Rule | None = None

    for line in lines:
        trimmed = line.strip()
        if not trimmed:
            continue

        if match := CATEGORY_RE.match(trimmed):
            category_id, title = match.group(1), match.group(2).strip()
            if not any(c.id == category_id for c in categories):
                categories.append(Category(id=category_id, title=title))
            current = _find_by_id(categories, category_id)
            if current is not category:
                subcategory = None
                rule = None
            category = current

        elif match := SUBCATEGORY_RE.match(trimmed):
            subcategory_id, title = match.group(1), match.group(2).strip()
            if category is None:
                raise OrphanLineError(trimmed, "category")
            if not subcategory_id.startswith(category.id):
                raise OrphanLineError(trimmed, f"category {subcategory_id[0]}")
            if category.find_subcategory(subcategory_id) is None:
                category.subcategories.append(Subcategory(id=subcategory_id, title=title))
            current = category.find_subcategory(subcategory_id)
            if current is not subcategory:
                rule = None
            subcategory = current

        elif match := RULE_RE.match(trimmed):
            rule_id = match.group(1)
            if subcategory is None:
                raise OrphanLineError(trimmed, "subcategory")
            parent_id = rule_id.split(".")[0]
            if parent_id != subcategory.id:
                raise OrphanLineError(trimmed, f"subcategory {parent_id}")
            subcategory.rules.append(Rule(id=rule_id, rule=match.group(2)))
            rule = subcategory.find_rule(rule_id)

        elif match := SUBRULE_RE.match(trimmed):
            subrule_id = match.group(1)
            if rule is None:
                raise OrphanLineError(trimmed, "rule")
            if subrule_id[:-1] != rule.id:
                raise OrphanLineError(trimmed, f"rule {subrule_id[:-1]}")
            rule.subrules.append(Subrule(id=subrule_id, rule=match.group(2)))

    return categories
