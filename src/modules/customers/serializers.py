"""Customer DRF serializer for API output.

Renders a ``Customer`` with the camelCase keys clients expect:
``{"id": 1, "firstName": "John", "lastName": "Doe"}``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(
        source="first_name", allow_null=True, allow_blank=True, required=False
    )
    lastName = serializers.CharField(
        source="last_name", allow_null=True, allow_blank=True, required=False
    )

    class Meta:
        model = Customer
        fields = ["id", "firstName", "lastName"]
        read_only_fields = ["id"]
