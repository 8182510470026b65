from crm.data_sources import DataSources


class DataSourcesMiddleware:
    """Attach a fresh ``DataSources`` to every request and close it afterwards."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.data_sources = DataSources()

        try:
            return self.get_response(request)
        finally:
            request.data_sources.close()
