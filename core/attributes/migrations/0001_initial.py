from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.CreateModel(
            name='Attribute',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('code', models.CharField(help_text="Key used in request payloads (e.g., 'linkedin_url')", max_length=100)),
                ('name', models.CharField(help_text='Display label', max_length=200)),
                ('type', models.CharField(choices=[('text', 'Text'), ('textarea', 'Textarea'), ('email', 'Email'), ('number', 'Number'), ('boolean', 'Boolean'), ('date', 'Date')], default='text', max_length=20)),
                ('entity_type', models.CharField(help_text="Entity the attribute applies to (e.g., 'persons')", max_length=50)),
                ('is_required', models.BooleanField(default=False)),
                ('is_user_defined', models.BooleanField(default=True, help_text='System attributes map to real columns and are not stored as values')),
                ('sort_order', models.IntegerField(default=0, help_text='Display order')),
            ],
            options={
                'db_table': 'attributes',
                'ordering': ['entity_type', 'sort_order', 'code'],
                'unique_together': {('code', 'entity_type')},
            },
        ),
        migrations.CreateModel(
            name='AttributeValue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('object_id', models.PositiveBigIntegerField()),
                ('text_value', models.TextField(blank=True, null=True)),
                ('number_value', models.DecimalField(blank=True, decimal_places=4, max_digits=18, null=True)),
                ('boolean_value', models.BooleanField(blank=True, null=True)),
                ('date_value', models.DateField(blank=True, null=True)),
                ('attribute', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='values', to='attributes.attribute')),
                ('content_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='contenttypes.contenttype')),
            ],
            options={
                'db_table': 'attribute_values',
                'indexes': [models.Index(fields=['content_type', 'object_id'], name='attr_value_entity_idx')],
                'unique_together': {('attribute', 'content_type', 'object_id')},
            },
        ),
    ]
