from __future__ import annotations

from datetime import date

from gedcom_validator.validation import kinship as relations
from gedcom_validator.validation.rules import kinship


def grandparents(person, family, cids=("I3", "I4")):
    """I1 + I2 married in F1 with children I3 (son) and I4 (daughter)."""
    indi = [
        person("I1", fams=["F1"]),
        person("I2", sex="F", fams=["F1"]),
    ]
    return indi, family("F1", hid="I1", wid="I2", cids=list(cids), marriage=date(1940, 1, 1))


def test_son_marries_mother(person, family, relation_of):
    indi, f1 = grandparents(person, family, cids=["I3"])
    indi[1] = person("I2", sex="F", fams=["F1", "F2"])
    indi.append(person("I3", famc="F1", fams=["F2"]))
    rel = relation_of(indi=indi, fami=[f1, family("F2", hid="I3", wid="I2")])

    assert kinship.no_marriages_to_descendants(rel) == [
        "US17: Mother(I2) should not marry son(I3) in family F1 and F2."
    ]


def test_daughter_marries_father(person, family, relation_of):
    indi, f1 = grandparents(person, family, cids=["I4"])
    indi[0] = person("I1", fams=["F1", "F2"])
    indi.append(person("I4", sex="F", famc="F1", fams=["F2"]))
    rel = relation_of(indi=indi, fami=[f1, family("F2", hid="I1", wid="I4")])

    out = kinship.no_marriages_to_descendants(rel)
    assert len(out) == 1
    assert out[0].startswith("US17: Father(I1) should not marry daughter(I4)")


def test_siblings_marry(person, family, relation_of):
    indi, f1 = grandparents(person, family)
    indi += [
        person("I3", famc="F1", fams=["F2"]),
        person("I4", sex="F", famc="F1", fams=["F2"]),
    ]
    rel = relation_of(indi=indi, fami=[f1, family("F2", hid="I3", wid="I4", marriage=date(1970, 1, 1))])

    assert kinship.siblings_should_not_marry(rel) == [
        "US18: Sibling(I3) and sibling(I4) should not be married in family(F2)."
    ]


def cousins_tree(person, family):
    """
    F1: I1 + I2 -> I3, I4
    F2: I3 + I5 -> I7
    F3: I6 + I4 -> I8
    F4: I7 + I8 (first cousins)
    """
    indi, f1 = grandparents(person, family)
    indi += [
        person("I3", famc="F1", fams=["F2"]),
        person("I4", sex="F", famc="F1", fams=["F3"]),
        person("I5", sex="F", fams=["F2"]),
        person("I6", fams=["F3"]),
        person("I7", famc="F2", fams=["F4"]),
        person("I8", sex="F", famc="F3", fams=["F4"]),
    ]
    fami = [
        f1,
        family("F2", hid="I3", wid="I5", cids=["I7"]),
        family("F3", hid="I6", wid="I4", cids=["I8"]),
        family("F4", hid="I7", wid="I8", marriage=date(2000, 1, 1)),
    ]
    return indi, fami


def test_first_cousins_helper(person, family, relation_of):
    indi, fami = cousins_tree(person, family)
    rel = relation_of(indi=indi, fami=fami)

    assert relations.aunts_and_uncles(rel, rel.fami["F2"]) == ["I4"]
    assert relations.first_cousins(rel, rel.fami["F2"]) == ["I8"]
    assert relations.siblings(rel, rel.indi["I3"]) == ["I4"]


def test_first_cousins_marry_reported_once(person, family, relation_of):
    indi, fami = cousins_tree(person, family)
    rel = relation_of(indi=indi, fami=fami)

    assert kinship.first_cousins_should_not_marry(rel) == [
        "US19: First cousins should not marry one another in family(F4)."
    ]
    assert kinship.aunts_and_uncles(rel) == []


def test_aunt_marries_nephew(person, family, relation_of):
    """
    F1: I1 + I2 -> I3, I4
    F2: I3 + I5 -> I6
    F3: I6 + I4 (nephew and aunt)
    """
    indi, f1 = grandparents(person, family)
    indi += [
        person("I3", famc="F1", fams=["F2"]),
        person("I4", sex="F", famc="F1", fams=["F3"]),
        person("I5", sex="F", fams=["F2"]),
        person("I6", famc="F2", fams=["F3"]),
    ]
    fami = [
        f1,
        family("F2", hid="I3", wid="I5", cids=["I6"]),
        family("F3", hid="I6", wid="I4", marriage=date(2000, 1, 1)),
    ]
    rel = relation_of(indi=indi, fami=fami)

    assert kinship.aunts_and_uncles(rel) == [
        "US20: Aunts/uncles and nieces/nephews should not be married in family(F3)."
    ]
    assert kinship.no_marriages_to_descendants(rel) == []
    assert kinship.first_cousins_should_not_marry(rel) == []


def test_unrelated_marriages(person, family, relation_of):
    indi, f1 = grandparents(person, family)
    indi += [person("I3", famc="F1"), person("I4", sex="F", famc="F1")]
    rel = relation_of(indi=indi, fami=[f1])

    assert kinship.no_marriages_to_descendants(rel) == []
    assert kinship.siblings_should_not_marry(rel) == []
    assert kinship.first_cousins_should_not_marry(rel) == []
    assert kinship.aunts_and_uncles(rel) == []
