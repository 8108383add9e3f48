from django.db import migrations, models
import django.core.validators
import django.db.models.deletion
from django.conf import settings

from courses.constants import MATERIAL_TYPES, SEMESTERS, choices


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Material",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("uploader_name", models.CharField(max_length=200)),
                ("title", models.CharField(max_length=200, validators=[django.core.validators.MinLengthValidator(3)])),
                ("description", models.TextField(blank=True, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("type", models.CharField(choices=choices(MATERIAL_TYPES), max_length=20)),
                ("semester", models.CharField(choices=choices(SEMESTERS), max_length=10)),
                ("year", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(2020), django.core.validators.MaxValueValidator(2030)])),
                ("file_type", models.CharField(editable=False, max_length=100)),
                ("file_name", models.CharField(editable=False, max_length=255)),
                ("file_data", models.BinaryField(editable=False)),
                ("file_size", models.PositiveIntegerField(default=0, editable=False)),
                ("download_count", models.PositiveIntegerField(default=0, editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("course", models.ForeignKey(db_column="course_code", on_delete=django.db.models.deletion.CASCADE, related_name="materials", to="courses.course", to_field="code")),
                ("uploaded_by", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="materials", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
