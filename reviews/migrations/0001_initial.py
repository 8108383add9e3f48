from django.db import migrations, models
import django.core.validators
import django.db.models.deletion
from django.conf import settings

import reviews.models
from courses.constants import GRADES, SEMESTERS, choices


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("courses", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Review",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_name", models.CharField(max_length=200)),
                ("user_photo", models.URLField(blank=True, max_length=500)),
                ("semester", models.CharField(choices=choices(SEMESTERS), max_length=10)),
                ("year", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(2020), django.core.validators.MaxValueValidator(2030)])),
                ("instructor", models.CharField(max_length=100)),
                ("rating", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ("difficulty", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ("workload", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ("grade", models.CharField(blank=True, choices=choices(GRADES), max_length=5)),
                ("review_text", models.TextField(validators=[django.core.validators.MinLengthValidator(50), django.core.validators.MaxLengthValidator(2000)])),
                ("pros", models.JSONField(blank=True, default=list, validators=[reviews.models.validate_short_items])),
                ("cons", models.JSONField(blank=True, default=list, validators=[reviews.models.validate_short_items])),
                ("tips", models.TextField(blank=True, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("helpful_count", models.PositiveIntegerField(default=0, editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("course", models.ForeignKey(db_column="course_code", on_delete=django.db.models.deletion.CASCADE, related_name="reviews", to="courses.course", to_field="code")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="reviews", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="review",
            constraint=models.UniqueConstraint(fields=("course", "user"), name="unique_review_per_course_user"),
        ),
    ]
