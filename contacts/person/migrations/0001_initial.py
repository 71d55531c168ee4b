from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organization', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Person',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('name', models.CharField(max_length=255)),
                ('job_title', models.CharField(blank=True, max_length=255, null=True)),
                ('organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='persons', to='organization.organization')),
                ('user', models.ForeignKey(blank=True, help_text='User who owns this record', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(app_label)s_%(class)s_owned', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'persons',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['name'], name='person_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='PersonEmail',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(max_length=254)),
                ('label', models.CharField(max_length=100)),
                ('position', models.PositiveIntegerField(default=0, help_text="Order within the person's list")),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='emails', to='person.person')),
            ],
            options={
                'db_table': 'person_emails',
                'ordering': ['position', 'id'],
                'abstract': False,
                'indexes': [models.Index(fields=['value'], name='person_email_value_idx')],
            },
        ),
        migrations.CreateModel(
            name='PersonContactNumber',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(max_length=254)),
                ('label', models.CharField(max_length=100)),
                ('position', models.PositiveIntegerField(default=0, help_text="Order within the person's list")),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='contact_numbers', to='person.person')),
            ],
            options={
                'db_table': 'person_contact_numbers',
                'ordering': ['position', 'id'],
                'abstract': False,
            },
        ),
    ]
