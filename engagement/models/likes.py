"""Like tables, one per entity kind."""

from .relation import UserRelation


class ProjectLike(UserRelation):
    class Meta(UserRelation.Meta):
        db_table = "project_likes"


class SnippetLike(UserRelation):
    class Meta(UserRelation.Meta):
        db_table = "snippet_likes"


class CommunityPostLike(UserRelation):
    class Meta(UserRelation.Meta):
        db_table = "community_post_likes"
