"""
User Account Models
Handles user authentication, roles and record visibility.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models


class Role(models.Model):
    """
    Role model granting access to API permissions.

    permission_type='all' grants every permission; 'custom' grants only the
    ACL keys listed in `permissions` (e.g. 'contacts.persons.create').
    """
    PERMISSION_TYPE_ALL = 'all'
    PERMISSION_TYPE_CUSTOM = 'custom'
    PERMISSION_TYPE_CHOICES = [
        (PERMISSION_TYPE_ALL, 'All'),
        (PERMISSION_TYPE_CUSTOM, 'Custom'),
    ]

    name = models.CharField(max_length=100, unique=True, db_index=True)
    description = models.TextField(blank=True, default='')
    permission_type = models.CharField(
        max_length=20,
        choices=PERMISSION_TYPE_CHOICES,
        default=PERMISSION_TYPE_CUSTOM
    )
    permissions = models.JSONField(
        default=list,
        blank=True,
        help_text="ACL keys granted when permission_type is 'custom'"
    )

    class Meta:
        db_table = 'roles'
        verbose_name = 'Role'
        verbose_name_plural = 'Roles'

    def __str__(self):
        return self.name

    def grants(self, permission):
        if self.permission_type == self.PERMISSION_TYPE_ALL:
            return True
        return permission in (self.permissions or [])


class UserGroup(models.Model):
    """Team of users who can see each other's records under 'group' visibility"""
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'groups'
        verbose_name = 'Group'
        verbose_name_plural = 'Groups'

    def __str__(self):
        return self.name


class CustomUserManager(BaseUserManager):
    """
    Custom user manager for CustomUser model.
    """

    def create_user(self, email, name, password=None, **extra_fields):
        """
        Create and save a user.

        Args:
            email: User's email address (used for authentication)
            name: User's full name
            password: User's password (will be hashed)
            **extra_fields: Additional fields (role, view_permission, ...)

        Returns:
            CustomUser: The created user instance
        """
        if not email:
            raise ValueError('Email is required')
        if not name:
            raise ValueError('Name is required')

        email = self.normalize_email(email)
        user = self.model(email=email, name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        """
        Create a user with an all-permissions role and global visibility.
        Required by Django for the createsuperuser management command.
        """
        role, _ = Role.objects.get_or_create(
            name='Administrator',
            defaults={
                'description': 'Administrator with full access',
                'permission_type': Role.PERMISSION_TYPE_ALL,
            }
        )
        extra_fields.setdefault('role', role)
        extra_fields.setdefault('view_permission', CustomUser.VIEW_GLOBAL)
        return self.create_user(email=email, name=name, password=password, **extra_fields)


class CustomUser(AbstractBaseUser):
    """
    Email-authenticated user.

    view_permission controls which owned records the user can list:
    - global: every record
    - group: records owned by members of the user's groups
    - individual: only records the user owns
    """
    VIEW_GLOBAL = 'global'
    VIEW_GROUP = 'group'
    VIEW_INDIVIDUAL = 'individual'
    VIEW_PERMISSION_CHOICES = [
        (VIEW_GLOBAL, 'Global'),
        (VIEW_GROUP, 'Group'),
        (VIEW_INDIVIDUAL, 'Individual'),
    ]

    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)
    status = models.BooleanField(default=True)

    role = models.ForeignKey(
        Role,
        on_delete=models.PROTECT,
        related_name='users',
        null=True,
        blank=True,
        help_text="Role determines API permissions"
    )
    view_permission = models.CharField(
        max_length=20,
        choices=VIEW_PERMISSION_CHOICES,
        default=VIEW_GLOBAL
    )
    groups = models.ManyToManyField(
        UserGroup,
        related_name='users',
        blank=True,
        db_table='user_groups'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.name} ({self.email})"

    @property
    def is_active(self):
        return self.status

    def has_permission(self, permission):
        """
        Check if the user's role grants an ACL key.

        Returns:
            bool: True if granted, False otherwise (including users without a role)
        """
        return self.role is not None and self.role.grants(permission)
