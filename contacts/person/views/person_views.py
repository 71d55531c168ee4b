"""
Person API views.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from contacts.person.serializers import (
    PersonResourceSerializer,
    PersonWriteSerializer,
    MassDestroySerializer
)
from contacts.person.services import PersonService
from core.events import get_event_dispatcher
from core.user_accounts.decorators import require_permission
from crm_project.pagination import (
    ResourceListPagination,
    StandardResultsSetPagination,
    paginate_queryset
)
from crm_project.response_formatter import success_response, error_response

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@require_permission('contacts.persons')
def person_list(request):
    """
    List persons or create a new one.

    GET /contacts/persons/?sort=name&order=asc&limit=10&page=1
    GET /contacts/persons/?pagination=0
    POST /contacts/persons/
    """
    if request.method == 'GET':
        persons = PersonService.list_persons(
            request.user,
            sort=request.query_params.get('sort'),
            order=request.query_params.get('order'),
        )
        return paginate_queryset(
            persons, request, PersonResourceSerializer,
            pagination_class=ResourceListPagination,
            allow_unpaginated=True
        )

    serializer = PersonWriteSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    person = PersonService.create(request.user, serializer.to_dto(), get_event_dispatcher())
    return success_response(
        data=PersonResourceSerializer(person).data,
        message='Person created successfully.',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('contacts.persons')
def person_detail(request, pk):
    """
    Retrieve, update or delete a person.

    Unknown ids raise Person.DoesNotExist, answered with 404 by the
    exception handler. Delete failures are answered with 500.
    """
    if request.method == 'GET':
        person = PersonService.get_person(pk)
        return success_response(data=PersonResourceSerializer(person).data)

    if request.method in ['PUT', 'PATCH']:
        serializer = PersonWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        person = PersonService.update(pk, serializer.to_dto(), get_event_dispatcher())
        return success_response(
            data=PersonResourceSerializer(person).data,
            message='Person updated successfully.'
        )

    try:
        PersonService.delete(pk, get_event_dispatcher())
    except Exception:
        logger.exception(f"Failed to delete person #{pk}")
        return error_response(
            'Person could not be deleted.',
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return success_response(message='Person deleted successfully.')


@api_view(['GET'])
@require_permission('contacts.persons')
def person_search(request):
    """
    Search persons.

    GET /contacts/persons/search/?search=email:a@b.com&search=name:jo&per_page=15

    Each `search` value is a separate term; all terms must match.
    """
    search = request.query_params.getlist('search') + request.query_params.getlist('search[]')

    persons = PersonService.search(request.user, search)
    return paginate_queryset(
        persons, request, PersonResourceSerializer,
        pagination_class=StandardResultsSetPagination
    )


@api_view(['POST'])
@require_permission('contacts.persons', 'delete')
def person_mass_destroy(request):
    """
    Delete several persons.

    POST /contacts/persons/mass-destroy/
    {"indices": [1, 2, 3]}

    Unknown ids are skipped; the response is the same whatever was deleted.
    """
    serializer = MassDestroySerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    PersonService.mass_delete(serializer.validated_data['indices'], get_event_dispatcher())
    return success_response(message='Persons deleted successfully.')
