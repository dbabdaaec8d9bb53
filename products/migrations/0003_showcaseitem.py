from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('products', '0002_postgres_search_indexes'),
    ]

    operations = [
        migrations.CreateModel(
            name='ShowcaseItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('collection', models.CharField(choices=[('bestseller', 'Bestseller'), ('trending', 'Trending'), ('newarrival', 'New arrival'), ('shopbycategory', 'Shop by category')], max_length=20)),
                ('title', models.CharField(max_length=255)),
                ('slug', models.SlugField(blank=True, max_length=255, unique=True)),
                ('description', models.TextField()),
                ('category', models.CharField(max_length=255)),
                ('images', models.JSONField(blank=True, default=list)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('mrp', models.DecimalField(decimal_places=2, max_digits=10)),
                ('discount', models.CharField(max_length=50)),
                ('ratings', models.DecimalField(decimal_places=1, default=0, max_digits=2)),
                ('variations', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['collection', '-created_at'], name='showcase_collection_idx')],
            },
        ),
    ]
