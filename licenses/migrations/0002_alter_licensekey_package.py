from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("licenses", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="licensekey",
            name="package",
            field=models.TextField(blank=True, null=True),
        ),
    ]
