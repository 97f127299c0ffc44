from rest_framework import serializers


class OperatorLoginSerializer(serializers.Serializer):
    """Serializer for operator login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class OperatorSessionSerializer(serializers.Serializer):
    """Current state of the operator session."""

    authenticated = serializers.BooleanField()
    username = serializers.CharField(allow_null=True)
    signed_in_at = serializers.DateTimeField(allow_null=True)
