from rest_framework import serializers

from .models import CustomUser, Role, UserGroup


class RoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Role
        fields = ['id', 'name', 'permission_type', 'permissions']
        read_only_fields = fields


class UserGroupSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserGroup
        fields = ['id', 'name']
        read_only_fields = fields


class UserProfileSerializer(serializers.ModelSerializer):
    """Read serializer for the authenticated user's profile"""
    role = RoleSerializer(read_only=True)
    groups = UserGroupSerializer(many=True, read_only=True)

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'status', 'view_permission', 'role', 'groups', 'created_at']
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})
