"""Unit tests for resource descriptors and factory functions."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from wanikani import resources
from wanikani.core.config import Configuration
from wanikani.core.enums import CachePolicy, SubjectKind
from wanikani.models import (
    Assignment,
    LevelProgression,
    ModelCollection,
    PresentationOrder,
    Reset,
    Review,
    ReviewStatistic,
    SpacedRepetitionSystem,
    StudyMaterial,
    Subject,
    Summary,
    User,
    VoiceActor,
)
from wanikani.runtime.rest.request import build_request
from wanikani.runtime.rest.resource import Resource


def _build(resource):
    return build_request(resource, Configuration(token="abc"))


@pytest.mark.parametrize(
    "resource,method,url,content",
    [
        (resources.assignments(), "GET", "assignments", ModelCollection[Assignment]),
        (resources.assignment(1), "GET", "assignments/1", Assignment),
        (resources.start_assignment(1), "PUT", "assignments/1/start", Assignment),
        (
            resources.level_progressions(),
            "GET",
            "level_progressions",
            ModelCollection[LevelProgression],
        ),
        (resources.level_progression(2), "GET", "level_progressions/2", LevelProgression),
        (resources.resets(), "GET", "resets", ModelCollection[Reset]),
        (resources.reset(3), "GET", "resets/3", Reset),
        (resources.reviews(), "GET", "reviews", ModelCollection[Review]),
        (resources.review(4), "GET", "reviews/4", Review),
        (resources.create_review(subject_id=4), "POST", "reviews", Review),
        (
            resources.review_statistics(),
            "GET",
            "review_statistics",
            ModelCollection[ReviewStatistic],
        ),
        (resources.review_statistic(5), "GET", "review_statistics/5", ReviewStatistic),
        (
            resources.spaced_repetition_systems(),
            "GET",
            "spaced_repetition_systems",
            ModelCollection[SpacedRepetitionSystem],
        ),
        (
            resources.spaced_repetition_system(6),
            "GET",
            "spaced_repetition_systems/6",
            SpacedRepetitionSystem,
        ),
        (resources.study_materials(), "GET", "study_materials", ModelCollection[StudyMaterial]),
        (resources.study_material(7), "GET", "study_materials/7", StudyMaterial),
        (resources.create_study_material(7), "POST", "study_materials", StudyMaterial),
        (resources.update_study_material(7), "PUT", "study_materials/7", StudyMaterial),
        (resources.subjects(), "GET", "subjects", ModelCollection[Subject]),
        (resources.subject(8), "GET", "subjects/8", Subject),
        (resources.summary(), "GET", "summary", Summary),
        (resources.user(), "GET", "user", User),
        (resources.update_user(lessons_batch_size=5), "PUT", "user", User),
        (resources.voice_actors(), "GET", "voice_actors", ModelCollection[VoiceActor]),
        (resources.voice_actor(9), "GET", "voice_actors/9", VoiceActor),
    ],
)
def test_catalogue(resource, method, url, content):
    """Test method, path and content type of every operation."""
    assert isinstance(resource, Resource)
    assert resource.content == content
    request = _build(resource)
    assert request.method == method
    assert request.url == f"https://api.wanikani.com/v2/{url}"
    assert request.headers["Authorization"] == "Bearer abc"


def test_unfiltered_list_has_no_query():
    assert _build(resources.assignments()).params == []


def test_assignment_filters():
    request = _build(
        resources.assignments(
            available_after=datetime(2020, 1, 1, tzinfo=UTC),
            burned=False,
            hidden=True,
            ids=[1, 2],
            immediately_available_for_lessons=True,
            in_review=True,
            levels=range(1, 4),
            srs_stages=[0, 9],
            subject_types=[SubjectKind.KANJI, SubjectKind.VOCABULARY],
            updated_after=datetime(2021, 6, 1, 12, 30, tzinfo=UTC),
        )
    )
    assert request.params == [
        ("available_after", "2020-01-01T00:00:00.000000Z"),
        ("burned", "false"),
        ("hidden", "true"),
        ("ids", "1,2"),
        ("immediately_available_for_lessons", "true"),
        ("in_review", "true"),
        ("levels", "1,2,3"),
        ("srs_stages", "0,9"),
        ("subject_types", "kanji,vocabulary"),
        ("updated_after", "2021-06-01T12:30:00.000000Z"),
    ]


def test_empty_filter_collection_is_omitted():
    assert _build(resources.reviews(ids=[], subject_ids=[3])).params == [("subject_ids", "3")]


def test_review_statistic_filters():
    request = _build(
        resources.review_statistics(percentages_greater_than=50, percentages_less_than=90)
    )
    assert request.params == [
        ("percentages_greater_than", "50"),
        ("percentages_less_than", "90"),
    ]


def test_subject_filters_and_cache_policy():
    resource = resources.subjects(
        types=["radical", "kanji"], slugs=["一"], levels=[1], hidden=False
    )
    request = _build(resource)
    assert request.params == [
        ("types", "radical,kanji"),
        ("slugs", "一"),
        ("levels", "1"),
        ("hidden", "false"),
    ]
    assert request.cache_policy is CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD
    assert resources.subject(1).cache_policy is CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD


def test_descriptors_are_immutable_values():
    resource = resources.assignments(ids=[1, 2])
    assert resource.ids == (1, 2)
    assert resource == resources.assignments(ids=(1, 2))
    with pytest.raises(AttributeError):
        resource.ids = (3,)


class TestBodies:
    """Test request body encoding."""

    def test_start_assignment_without_time(self):
        assert json.loads(_build(resources.start_assignment(1)).body) == {}

    def test_start_assignment_with_time(self):
        started_at = datetime(2020, 5, 6, 7, 8, 9, 123456, tzinfo=UTC)
        body = json.loads(_build(resources.start_assignment(1, started_at=started_at)).body)
        assert body == {"started_at": "2020-05-06T07:08:09.123456Z"}

    def test_create_review(self):
        resource = resources.create_review(subject_id=8, incorrect_reading_answers=2)
        body = json.loads(_build(resource).body)
        assert body == {
            "review": {
                "subject_id": 8,
                "incorrect_meaning_answers": 0,
                "incorrect_reading_answers": 2,
            }
        }

    def test_create_review_requires_target(self):
        with pytest.raises(ValidationError):
            resources.create_review()

    def test_create_review_rejects_negative_counts(self):
        with pytest.raises(ValidationError):
            resources.create_review(assignment_id=1, incorrect_meaning_answers=-1)

    def test_create_study_material(self):
        resource = resources.create_study_material(
            241, meaning_note="I like turtles", meaning_synonyms=["turtle"]
        )
        assert json.loads(_build(resource).body) == {
            "study_material": {
                "subject_id": 241,
                "meaning_note": "I like turtles",
                "meaning_synonyms": ["turtle"],
            }
        }

    def test_update_study_material_can_clear_synonyms(self):
        resource = resources.update_study_material(65231, meaning_synonyms=[])
        assert json.loads(_build(resource).body) == {"study_material": {"meaning_synonyms": []}}

    def test_update_user(self):
        resource = resources.update_user(
            lessons_batch_size=5,
            lessons_presentation_order=PresentationOrder.SHUFFLED,
            reviews_autoplay_audio=False,
        )
        assert json.loads(_build(resource).body) == {
            "user": {
                "preferences": {
                    "lessons_batch_size": 5,
                    "lessons_presentation_order": "shuffled",
                    "reviews_autoplay_audio": False,
                }
            }
        }

    def test_bodies_decode_nested_shape(self):
        """Test a server echo of the nested JSON decodes to the same body."""
        created_at = datetime(2023, 1, 2, 3, 4, 5, 678901, tzinfo=UTC)
        body = resources.create_review(
            assignment_id=7, incorrect_meaning_answers=1, created_at=created_at
        ).body
        echoed = type(body).model_validate_json(body.model_dump_json())
        assert echoed == body
        assert echoed.created_at == created_at

    def test_update_user_body_decodes_nested_shape(self):
        body = resources.UpdateUserBody.model_validate(
            {"user": {"preferences": {"default_voice_actor_id": 2}}}
        )
        assert body.default_voice_actor_id == 2
        assert body.lessons_batch_size is None
