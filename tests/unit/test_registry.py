import pytest
from prometheus_client import CollectorRegistry

from profiles.core.exceptions import PersonNotFoundError
from profiles.models import FamilyMember, Friend, User
from profiles.registry import PersonRegistry
from profiles.utils.monitoring import MonitoringService


def _friend(name, surname="Lee", relation=None):
    return Friend(name=name, surname=surname, birth_date="1990", gender="other", relation=relation)


def _member(name, surname="Lee"):
    return FamilyMember(name=name, surname=surname, birth_date="1960", gender="male")


def test_empty_registry_has_empty_summaries(people):
    assert people.get_friend_names() == ""
    assert people.get_family_member_names() == ""
    assert len(people) == 0


def test_friend_names_keep_insertion_order_and_trailing_separator(people):
    people.add_person(_friend("Ann"))
    people.add_person(_member("Tom"))
    people.add_person(_friend("Bo", "Kim"))
    people.add_person(User(name="Me", surname="Self", birth_date="2000", gender="female"))

    assert people.get_friend_names() == "Ann Lee,Bo Kim,"
    assert people.get_family_member_names() == "Tom Lee,"


def test_no_deduplication(people):
    ann = _friend("Ann")
    people.add_person(ann)
    people.add_person(ann)

    assert people.get_friend_names() == "Ann Lee,Ann Lee,"
    assert len(people) == 2


def test_scenario_a_friend_without_relation(people):
    ann = _friend("Ann")
    people.add_person(ann)

    assert people.get_friend_names() == "Ann Lee,"
    with pytest.raises(ValueError, match="Friend relation is not defined."):
        ann.check_relation()


def test_scenario_b_friend_with_relation(people):
    ann = _friend("Ann", relation="colleague")
    people.add_person(ann)

    assert ann.check_relation() == "colleague"


def test_scenario_c_clear_then_add(people):
    people.add_person(_friend("Ann"))
    people.add_person(_member("Tom"))

    people.clear()
    people.add_person(_member("Eva", "Park"))

    assert people.get_friend_names() == ""
    assert people.get_family_member_names() == "Eva Park,"


def test_clear_empties_summaries(people):
    people.add_person(_friend("Ann"))
    people.add_person(_member("Tom"))

    people.clear()

    assert people.get_friend_names() == ""
    assert people.get_family_member_names() == ""
    assert people.people == ()


def test_variant_filters_and_snapshots(people):
    ann, tom = _friend("Ann"), _member("Tom")
    user = User(name="Me", surname="Self", birth_date="2000", gender="female")
    for person in (ann, user, tom):
        people.add_person(person)

    assert people.friends() == [ann]
    assert people.family_members() == [tom]
    assert people.associates() == [ann, tom]
    assert people.people == (ann, user, tom)
    assert list(people) == [ann, user, tom]


def test_get_by_position(people):
    ann = _friend("Ann")
    people.add_person(ann)

    assert people.get(0) is ann
    with pytest.raises(PersonNotFoundError):
        people.get(1)
    with pytest.raises(PersonNotFoundError):
        people.get(-1)


def test_custom_separator():
    people = PersonRegistry(separator="; ", metrics=MonitoringService())
    people.add_person(_member("Tom"))

    assert people.get_family_member_names() == "Tom Lee; "


def test_metrics_follow_mutations():
    collector = CollectorRegistry()
    people = PersonRegistry(metrics=MonitoringService(collector))

    people.add_person(_friend("Ann"))
    people.add_person(_friend("Bo"))
    people.add_person(_member("Tom"))
    assert collector.get_sample_value("people_added_total", {"kind": "friend"}) == 2
    assert collector.get_sample_value("registry_size") == 3

    people.clear()
    assert collector.get_sample_value("registry_size") == 0
    assert collector.get_sample_value("registry_clears_total") == 1
