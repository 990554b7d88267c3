"""View tables for projects and snippets."""

from .relation import ViewRelation


class ProjectView(ViewRelation):
    class Meta(ViewRelation.Meta):
        db_table = "project_views"


class SnippetView(ViewRelation):
    class Meta(ViewRelation.Meta):
        db_table = "snippet_views"
