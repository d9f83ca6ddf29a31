# Generated migration for Customer

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=100, verbose_name="nome")),
                (
                    "person_type",
                    models.CharField(
                        choices=[
                            ("individual", "Pessoa Física"),
                            ("organization", "Pessoa Jurídica"),
                        ],
                        db_index=True,
                        default="individual",
                        max_length=20,
                        verbose_name="tipo de pessoa",
                    ),
                ),
                (
                    "individual_id",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        help_text="CPF (apenas números)",
                        max_length=11,
                        verbose_name="CPF",
                    ),
                ),
                (
                    "organization_id",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        help_text="CNPJ (apenas números)",
                        max_length=14,
                        verbose_name="CNPJ",
                    ),
                ),
                (
                    "birth_date",
                    models.DateField(
                        blank=True, null=True, verbose_name="data de nascimento"
                    ),
                ),
                (
                    "postal_code",
                    models.CharField(
                        blank=True,
                        max_length=9,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="CEP deve seguir o formato 00000-000.",
                                regex="^\\d{5}-\\d{3}$",
                            )
                        ],
                        verbose_name="CEP",
                    ),
                ),
                (
                    "street",
                    models.CharField(blank=True, max_length=200, verbose_name="endereço"),
                ),
                (
                    "number",
                    models.CharField(blank=True, max_length=10, verbose_name="número"),
                ),
                (
                    "city",
                    models.CharField(
                        blank=True, db_index=True, max_length=100, verbose_name="cidade"
                    ),
                ),
                (
                    "district",
                    models.CharField(blank=True, max_length=100, verbose_name="bairro"),
                ),
                (
                    "complement",
                    models.CharField(
                        blank=True, max_length=100, verbose_name="complemento"
                    ),
                ),
                (
                    "state_code",
                    models.CharField(
                        blank=True,
                        max_length=2,
                        validators=[django.core.validators.MinLengthValidator(2)],
                        verbose_name="UF",
                    ),
                ),
                (
                    "landline",
                    models.CharField(
                        blank=True, max_length=15, verbose_name="telefone fixo"
                    ),
                ),
                (
                    "mobile",
                    models.CharField(blank=True, max_length=15, verbose_name="celular"),
                ),
                (
                    "email",
                    models.EmailField(
                        blank=True, db_index=True, max_length=100, verbose_name="email"
                    ),
                ),
                (
                    "registered_at",
                    models.DateTimeField(db_index=True, verbose_name="data de cadastro"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(verbose_name="data de atualização"),
                ),
            ],
            options={
                "verbose_name": "cliente",
                "verbose_name_plural": "clientes",
                "ordering": ["name", "id"],
            },
        ),
        migrations.AddConstraint(
            model_name="customer",
            constraint=models.UniqueConstraint(
                condition=models.Q(("email", ""), _negated=True),
                fields=("email",),
                name="celidone_customer_unique_email",
            ),
        ),
        migrations.AddConstraint(
            model_name="customer",
            constraint=models.UniqueConstraint(
                condition=models.Q(
                    ("person_type", "organization"),
                    models.Q(("organization_id", ""), _negated=True),
                ),
                fields=("organization_id",),
                name="celidone_customer_unique_organization_id",
            ),
        ),
    ]
