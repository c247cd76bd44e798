import pytest

from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.schemas.complaint.complaint_filters import ComplaintFilterParams
from campus_complaints.services.complaint.complaint_search_service import (
    apply,
    matches_text,
)


@pytest.fixture()
def complaints(make_complaint):
    return [
        make_complaint(title="Leaking PIPE in washroom", description="Water on the floor"),
        make_complaint(title="Wi-Fi down", description="No signal in the library", status=ComplaintStatus.IN_PROGRESS),
        make_complaint(title="Noisy generator", description="The drain pipe rattles all night", status=ComplaintStatus.RESOLVED),
        make_complaint(title="Lab projector", description="Bulb is dead", status=ComplaintStatus.IN_PROGRESS),
    ]


def test_empty_query_returns_set_unchanged(complaints):
    assert apply(complaints, ComplaintFilterParams(text="", status=None)) == complaints
    assert apply(complaints) == complaints


def test_whitespace_only_text_matches_everything(complaints):
    assert apply(complaints, ComplaintFilterParams(text="   ")) == complaints


def test_text_matches_title_or_description_case_insensitively(complaints):
    result = apply(complaints, ComplaintFilterParams(text="pipe"))

    assert [c.title for c in result] == ["Leaking PIPE in washroom", "Noisy generator"]
    assert all(c in complaints for c in result)


def test_status_filter(complaints):
    result = apply(complaints, ComplaintFilterParams(status=ComplaintStatus.IN_PROGRESS))

    assert [c.title for c in result] == ["Wi-Fi down", "Lab projector"]


def test_text_and_status_are_anded(complaints):
    query = ComplaintFilterParams(text="pipe", status=ComplaintStatus.RESOLVED)

    assert [c.title for c in apply(complaints, query)] == ["Noisy generator"]


def test_status_accepts_wire_value(complaints):
    query = ComplaintFilterParams(status="in-progress")

    assert len(apply(complaints, query)) == 2


def test_no_match_is_empty(complaints):
    assert apply(complaints, ComplaintFilterParams(text="elevator")) == []


def test_result_is_a_new_list(complaints):
    result = apply(complaints)
    result.pop()

    assert len(complaints) == 4


def test_matches_text_without_term(make_complaint):
    assert matches_text(make_complaint(), None)


def test_leading_space_is_part_of_the_search(make_complaint):
    pipeline = make_complaint(title="Pipeline survey", description="Survey of the water mains")
    leak = make_complaint(title="Leaking pipe", description="Washroom 2")

    assert apply([pipeline, leak], ComplaintFilterParams(text=" pipe")) == [leak]
    assert apply([pipeline, leak], ComplaintFilterParams(text="pipe")) == [pipeline, leak]


def test_long_pasted_query_filters_without_error(make_complaint):
    long_text = "water dripping from the ceiling " * 10
    match = make_complaint(description=long_text)
    other = make_complaint()

    assert apply([match, other], ComplaintFilterParams(text=long_text.upper())) == [match]
    assert apply([match, other], ComplaintFilterParams(text="z" * 300)) == []
