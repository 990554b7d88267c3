from .likes import ProjectLike, SnippetLike, CommunityPostLike
from .saves import SavedProject, SavedSnippet, SavedCommunityPost
from .view_records import ProjectView, SnippetView

RELATION_MODELS = {
    model._meta.db_table: model
    for model in (
        ProjectLike,
        SnippetLike,
        CommunityPostLike,
        SavedProject,
        SavedSnippet,
        SavedCommunityPost,
        ProjectView,
        SnippetView,
    )
}

__all__ = [
    "ProjectLike",
    "SnippetLike",
    "CommunityPostLike",
    "SavedProject",
    "SavedSnippet",
    "SavedCommunityPost",
    "ProjectView",
    "SnippetView",
    "RELATION_MODELS",
]
