from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LicenseKey",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("key_text", models.CharField(max_length=64, unique=True)),
                ("package", models.CharField(blank=True, max_length=255, null=True)),
                ("duration_days", models.IntegerField(default=1)),
                ("created_at", models.DateTimeField(db_index=True)),
                ("expires_at", models.DateTimeField(blank=True, null=True)),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "verbose_name": "license key",
                "db_table": "keys",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
