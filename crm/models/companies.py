from django.db import models

from crm.errors import DocumentNotFound

from .base import Document


class CompanyManager(models.Manager):
    def get_company(self, pk):
        company = self.filter(pk=pk).first()

        if company is None:
            raise DocumentNotFound("Company not found")

        return company

    def get_companies(self, company_ids):
        """Fetch every company in ``company_ids``, failing on the first unknown id."""
        company_ids = list(dict.fromkeys(company_ids))
        companies = list(self.filter(pk__in=company_ids))

        if len(companies) != len(company_ids):
            raise DocumentNotFound("Company not found")

        return companies


class Company(Document):
    primary_name = models.CharField(max_length=255)
    website = models.URLField(blank=True)
    industry = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)

    objects = CompanyManager()

    class Meta(Document.Meta):
        verbose_name_plural = "companies"

    def __str__(self):
        return self.primary_name
