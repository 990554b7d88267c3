from rest_framework import serializers


class InteractionStateSerializer(serializers.Serializer):
    """What a like/save widget renders, read from an InteractionBinder."""
    liked = serializers.BooleanField(read_only=True)
    saved = serializers.BooleanField(read_only=True)
    like_count = serializers.IntegerField(read_only=True)
    view_count = serializers.IntegerField(read_only=True)
    pending = serializers.BooleanField(read_only=True)


class InteractionActionSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=["like", "save"])


class NoticeSerializer(serializers.Serializer):
    kind = serializers.CharField(source="kind.value", read_only=True)
    title = serializers.CharField(read_only=True)
    message = serializers.CharField(read_only=True)
