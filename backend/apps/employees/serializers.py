"""
Employee serializers.
Accepts either a full `name` or separate first/last names.
"""
from rest_framework import serializers
from apps.employees.models import Employee, split_name
from common.hypermedia import COLLECTION, SELF, HypermediaSerializerMixin, LinkDescriptor


class EmployeeSerializer(HypermediaSerializerMixin, serializers.ModelSerializer):
    """Employee with `_links`; `name` is read and written for older clients."""
    link_routes = {
        SELF: 'employees:detail',
        COLLECTION: 'employees:list-create',
    }

    name = serializers.CharField(max_length=201, required=False)

    class Meta:
        model = Employee
        fields = ['id', 'name', 'first_name', 'last_name', 'role']
        read_only_fields = ['id']
        extra_kwargs = {
            'first_name': {'required': False},
            'last_name': {'required': False},
        }

    def validate(self, attrs):
        name = attrs.pop('name', None)
        if name is not None:
            if 'first_name' in attrs or 'last_name' in attrs:
                # Both forms sent: they must describe the same person
                given = f"{attrs.get('first_name', '')} {attrs.get('last_name', '')}".strip()
                if given != name.strip():
                    raise serializers.ValidationError(
                        {'name': f"'{name}' does not match first_name and last_name '{given}'"}
                    )
            else:
                attrs['first_name'], attrs['last_name'] = split_name(name)

        if not attrs.get('first_name'):
            raise serializers.ValidationError(
                {'name': 'Provide a name or a first_name'}
            )
        attrs.setdefault('last_name', '')
        return attrs

    def get_link_descriptors(self, instance):
        return (
            LinkDescriptor(SELF, instance.pk),
            LinkDescriptor(COLLECTION, 'employees'),
        )
