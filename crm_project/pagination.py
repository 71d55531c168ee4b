"""
Pagination for Function-Based Views

Resource collections are returned in the envelope:
{
    "data": [...],
    "links": {"first": ..., "last": ..., "prev": ..., "next": ...},
    "meta": {"current_page": 1, "from": 1, "last_page": 3, "path": ...,
             "per_page": 15, "to": 15, "total": 40}
}
"""
from django.core.paginator import Page
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.utils.urls import replace_query_param


class StandardResultsSetPagination(PageNumberPagination):
    """
    Standard pagination class for the project.

    Query Parameters:
    - page: Page number (default: 1)
    - per_page: Items per page (default: 15, max: 100)
    """
    page_size = 15
    page_size_query_param = 'per_page'
    max_page_size = 100

    def paginate_queryset(self, queryset, request, view=None):
        """
        Paginate without raising for out-of-range pages.

        A page past the end is returned empty with full metadata; a missing,
        malformed or non-positive page number falls back to page 1.
        """
        self.request = request
        paginator = self.django_paginator_class(queryset, self.get_page_size(request))

        try:
            page_number = max(int(request.query_params.get(self.page_query_param, 1)), 1)
        except (TypeError, ValueError):
            page_number = 1

        if page_number > paginator.num_pages:
            self.page = Page([], page_number, paginator)
        else:
            self.page = paginator.page(page_number)

        return list(self.page)

    def get_page_url(self, page_number):
        url = self.request.build_absolute_uri()
        return replace_query_param(url, self.page_query_param, page_number)

    def get_paginated_response(self, data):
        """
        Wrap the page in the data/links/meta envelope.
        """
        page = self.page
        paginator = page.paginator
        count = paginator.count

        return Response({
            'data': data,
            'links': {
                'first': self.get_page_url(1),
                'last': self.get_page_url(paginator.num_pages),
                'prev': self.get_page_url(page.number - 1) if page.number > 1 else None,
                'next': self.get_page_url(page.number + 1) if page.number < paginator.num_pages else None,
            },
            'meta': {
                'current_page': page.number,
                'from': page.start_index() if page.object_list else None,
                'last_page': paginator.num_pages,
                'path': self.request.build_absolute_uri(self.request.path),
                'per_page': paginator.per_page,
                'to': page.end_index() if page.object_list else None,
                'total': count,
            }
        })


class ResourceListPagination(StandardResultsSetPagination):
    """
    Pagination for plain resource listings.

    Query Parameters:
    - page: Page number (default: 1)
    - limit: Items per page (default: 10, max: 100)
    """
    page_size = 10
    page_size_query_param = 'limit'


def paginate_queryset(queryset, request, serializer_class,
                      pagination_class=StandardResultsSetPagination, allow_unpaginated=False):
    """
    Paginate a queryset and return the enveloped response.

    With allow_unpaginated, ?pagination=0 returns {"data": [...]} unpaginated.

    Usage:
        from crm_project.pagination import paginate_queryset

        persons = PersonService.search(request.user, terms)
        return paginate_queryset(persons, request, PersonResourceSerializer)
    """
    if allow_unpaginated and request.query_params.get('pagination') in ('0', 'false'):
        serializer = serializer_class(queryset, many=True)
        return Response({'data': serializer.data})

    paginator = pagination_class()
    page = paginator.paginate_queryset(queryset, request)
    serializer = serializer_class(page, many=True)
    return paginator.get_paginated_response(serializer.data)
