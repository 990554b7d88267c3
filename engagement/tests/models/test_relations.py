import uuid

from django.db import IntegrityError, transaction
from django.test import TestCase

from engagement.models import (
    RELATION_MODELS,
    CommunityPostLike,
    ProjectLike,
    ProjectView,
    SavedProject,
)
from engagement.tests.helpers import make_user


class RelationModelTests(TestCase):
    def setUp(self):
        self.user_a = make_user(username="usera")
        self.user_b = make_user(username="userb")
        self.project_id = uuid.uuid4()

    def test_user_can_like_a_project(self):
        like = ProjectLike.objects.create(user=self.user_b, entity_id=self.project_id)

        self.assertEqual(like.user, self.user_b)
        self.assertEqual(like.entity_id, self.project_id)
        self.assertEqual(ProjectLike.objects.count(), 1)

    def test_duplicate_like_not_allowed(self):
        ProjectLike.objects.create(user=self.user_b, entity_id=self.project_id)

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                ProjectLike.objects.create(user=self.user_b, entity_id=self.project_id)

    def test_same_user_can_like_and_save(self):
        ProjectLike.objects.create(user=self.user_a, entity_id=self.project_id)
        SavedProject.objects.create(user=self.user_a, entity_id=self.project_id)

        self.assertEqual(ProjectLike.objects.filter(entity_id=self.project_id).count(), 1)
        self.assertEqual(SavedProject.objects.filter(entity_id=self.project_id).count(), 1)

    def test_tables_are_independent_per_kind(self):
        ProjectLike.objects.create(user=self.user_a, entity_id=self.project_id)
        CommunityPostLike.objects.create(user=self.user_a, entity_id=self.project_id)

        self.assertEqual(ProjectLike.objects.count(), 1)
        self.assertEqual(CommunityPostLike.objects.count(), 1)

    def test_signed_in_view_is_unique(self):
        ProjectView.objects.create(user=self.user_a, entity_id=self.project_id)

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                ProjectView.objects.create(user=self.user_a, entity_id=self.project_id)

    def test_anonymous_views_are_not_deduplicated(self):
        ProjectView.objects.create(user=None, entity_id=self.project_id)
        ProjectView.objects.create(user=None, entity_id=self.project_id)

        self.assertEqual(ProjectView.objects.filter(entity_id=self.project_id).count(), 2)

    def test_string_representation(self):
        like = ProjectLike.objects.create(user=self.user_b, entity_id=self.project_id)
        view = ProjectView.objects.create(user=None, entity_id=self.project_id)

        self.assertIn(str(self.project_id), str(like))
        self.assertIn("anonymous", str(view))

    def test_registry_covers_every_table(self):
        self.assertEqual(
            set(RELATION_MODELS),
            {
                "project_likes",
                "snippet_likes",
                "community_post_likes",
                "saved_projects",
                "saved_snippets",
                "saved_community_posts",
                "project_views",
                "snippet_views",
            },
        )
