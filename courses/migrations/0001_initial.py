from django.db import migrations, models
import django.core.validators

import courses.models
from courses.constants import PROGRAMS, choices


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=15, unique=True, validators=[courses.models.validate_course_code])),
                ("name", models.CharField(max_length=200, validators=[django.core.validators.MinLengthValidator(3)])),
                ("program", models.CharField(choices=choices(PROGRAMS), max_length=100)),
                ("credits", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(10)])),
                ("description", models.TextField()),
                ("prerequisites", models.JSONField(blank=True, default=list, validators=[courses.models._string_list])),
                ("instructors", models.JSONField(blank=True, default=list, validators=[courses.models._string_list])),
                ("average_rating", models.DecimalField(decimal_places=2, default=0, editable=False, max_digits=3)),
                ("review_count", models.PositiveIntegerField(default=0, editable=False)),
                ("average_difficulty", models.DecimalField(decimal_places=2, default=0, editable=False, max_digits=3)),
                ("average_workload", models.DecimalField(decimal_places=2, default=0, editable=False, max_digits=3)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["code"],
            },
        ),
    ]
