"""Saved-item tables, one per entity kind."""

from .relation import UserRelation


class SavedProject(UserRelation):
    class Meta(UserRelation.Meta):
        db_table = "saved_projects"


class SavedSnippet(UserRelation):
    class Meta(UserRelation.Meta):
        db_table = "saved_snippets"


class SavedCommunityPost(UserRelation):
    class Meta(UserRelation.Meta):
        db_table = "saved_community_posts"
