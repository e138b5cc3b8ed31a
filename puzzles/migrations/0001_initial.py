from django.db import migrations, models
import django.utils.timezone
import puzzles.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ApprovedPuzzle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('movie_name', models.CharField(max_length=200)),
                ('submitted_by', models.CharField(blank=True, max_length=150)),
                ('clues', models.JSONField(default=list, help_text='Ordered list of clue strings', validators=[puzzles.models.validate_clues])),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'ordering': ['created_at', 'id'],
                'indexes': [models.Index(fields=['created_at', 'id'], name='approved_fifo_idx')],
            },
        ),
        migrations.CreateModel(
            name='DisplayPuzzle',
            fields=[
                ('movie_name', models.CharField(max_length=200)),
                ('submitted_by', models.CharField(blank=True, max_length=150)),
                ('clues', models.JSONField(default=list, help_text='Ordered list of clue strings', validators=[puzzles.models.validate_clues])),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('key', models.CharField(default='current', editable=False, max_length=16, primary_key=True, serialize=False)),
                ('displayed_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('expiry_date', models.DateTimeField(blank=True, null=True)),
                ('source_id', models.BigIntegerField(blank=True, help_text='ApprovedPuzzle this was promoted from', null=True)),
            ],
            options={
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='HistoryPuzzle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('movie_name', models.CharField(max_length=200)),
                ('submitted_by', models.CharField(blank=True, max_length=150)),
                ('clues', models.JSONField(default=list, help_text='Ordered list of clue strings', validators=[puzzles.models.validate_clues])),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('displayed_at', models.DateTimeField(blank=True, null=True)),
                ('expiry_date', models.DateTimeField(blank=True, null=True)),
                ('source_id', models.BigIntegerField(blank=True, null=True)),
                ('moved_to_history_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name_plural': 'history puzzles',
                'ordering': ['-moved_to_history_at', '-id'],
            },
        ),
    ]
