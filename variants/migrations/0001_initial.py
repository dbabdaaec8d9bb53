import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('invoices', '0001_initial'),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='GarmentVariant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kind', models.CharField(choices=[('blouse', 'Blouse'), ('one_pc_kurti', 'One piece kurti'), ('two_pc_kurti', 'Two piece kurti'), ('three_pc_kurti', 'Three piece kurti'), ('petticoat_kurti', 'Petticoat kurti'), ('three_pc_lehenga', 'Three piece lehenga')], db_index=True, max_length=32)),
                ('financial_year', models.CharField(max_length=20)),
                ('quantity', models.PositiveIntegerField(default=0)),
                ('attributes', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('parent_product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='variants', to='products.product')),
                ('wholesaler', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='variants', to='invoices.wholesaler')),
            ],
            options={
                'ordering': ['-updated_at'],
                'indexes': [models.Index(fields=['kind', 'parent_product'], name='variant_kind_parent_idx')],
            },
        ),
    ]
