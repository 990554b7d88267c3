import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ProjectLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "project_likes",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_projectlike_user_entity")],
            },
        ),
        migrations.CreateModel(
            name="SnippetLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "snippet_likes",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_snippetlike_user_entity")],
            },
        ),
        migrations.CreateModel(
            name="CommunityPostLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "community_post_likes",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_communitypostlike_user_entity")],
            },
        ),
        migrations.CreateModel(
            name="SavedProject",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "saved_projects",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_savedproject_user_entity")],
            },
        ),
        migrations.CreateModel(
            name="SavedSnippet",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "saved_snippets",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_savedsnippet_user_entity")],
            },
        ),
        migrations.CreateModel(
            name="SavedCommunityPost",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "saved_community_posts",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_savedcommunitypost_user_entity")],
            },
        ),
        migrations.CreateModel(
            name="ProjectView",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "project_views",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_projectview_user_entity")],
            },
        ),
        migrations.CreateModel(
            name="SnippetView",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entity_id", models.UUIDField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "snippet_views",
                "abstract": False,
                "constraints": [models.UniqueConstraint(fields=("user", "entity_id"), name="uniq_snippetview_user_entity")],
            },
        ),
    ]
