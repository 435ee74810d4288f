from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.TextField(null=True)),
                ('description', models.TextField(null=True)),
                ('image_url', models.TextField(null=True)),
                ('link', models.TextField(null=True)),
                ('category', models.TextField(null=True)),
            ],
            options={
                'db_table': 'projects',
            },
        ),
        migrations.CreateModel(
            name='ResumeEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.TextField(null=True)),
                ('company', models.TextField(null=True)),
                ('duration', models.TextField(null=True)),
                ('description', models.TextField(null=True)),
                ('type', models.TextField(null=True)),
            ],
            options={
                'db_table': 'resume_entries',
            },
        ),
        migrations.CreateModel(
            name='Setting',
            fields=[
                ('key', models.TextField(primary_key=True, serialize=False)),
                ('value', models.TextField(null=True)),
            ],
            options={
                'db_table': 'settings',
            },
        ),
    ]
