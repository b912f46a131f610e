"""
Employee views and API endpoints.
"""
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse
from apps.employees.serializers import EmployeeSerializer
from apps.employees.services.employee_service import EmployeeService
from common.hypermedia import absolute_url, hal_collection
from common.schema_examples import (
    EMPLOYEE_REQUEST_EXAMPLE,
    EMPLOYEE_RESPONSE_EXAMPLE,
    NOT_FOUND_EXAMPLE,
)

employee_service = EmployeeService()


def employee_response(request, employee, status_code=status.HTTP_200_OK, headers=None):
    serializer = EmployeeSerializer(employee, context={'request': request})
    return Response(serializer.data, status=status_code, headers=headers)


def created_response(request, employee):
    location = absolute_url(request, 'employees:detail', [employee.pk])
    return employee_response(
        request,
        employee,
        status_code=status.HTTP_201_CREATED,
        headers={'Location': location}
    )


@extend_schema(
    methods=['GET'],
    tags=['Employees'],
    summary='List employees',
    responses={200: EmployeeSerializer(many=True)},
)
@extend_schema(
    methods=['POST'],
    tags=['Employees'],
    summary='Create an employee',
    request=EmployeeSerializer,
    examples=[EMPLOYEE_REQUEST_EXAMPLE, EMPLOYEE_RESPONSE_EXAMPLE],
    responses={201: EmployeeSerializer},
)
@api_view(['GET', 'POST'])
def employee_list(request):
    """
    GET: every employee as a HAL collection.
    POST: create an employee from `name` or first/last names.
    """
    if request.method == 'GET':
        serializer = EmployeeSerializer(
            employee_service.list_employees(),
            many=True,
            context={'request': request}
        )
        return Response(hal_collection(
            'employees',
            serializer.data,
            absolute_url(request, 'employees:list-create')
        ))

    serializer = EmployeeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    employee = employee_service.create_employee(**serializer.validated_data)
    return created_response(request, employee)


@extend_schema(
    methods=['GET'],
    tags=['Employees'],
    summary='Get an employee',
    responses={
        200: OpenApiResponse(response=EmployeeSerializer, examples=[EMPLOYEE_RESPONSE_EXAMPLE]),
        404: OpenApiResponse(description='Unknown employee', examples=[NOT_FOUND_EXAMPLE]),
    },
)
@extend_schema(
    methods=['PUT'],
    tags=['Employees'],
    summary='Replace an employee',
    description='Creates the employee under this id when it does not exist yet.',
    request=EmployeeSerializer,
    examples=[EMPLOYEE_REQUEST_EXAMPLE],
    responses={200: EmployeeSerializer, 201: EmployeeSerializer},
)
@extend_schema(
    methods=['DELETE'],
    tags=['Employees'],
    summary='Delete an employee',
    responses={
        204: None,
        404: OpenApiResponse(description='Unknown employee', examples=[NOT_FOUND_EXAMPLE]),
    },
)
@api_view(['GET', 'PUT', 'DELETE'])
def employee_detail(request, pk):
    """
    Single employee.
    Missing ids raise EmployeeNotFound, rendered as 404.
    """
    if request.method == 'GET':
        return employee_response(request, employee_service.get_employee(pk))

    if request.method == 'DELETE':
        employee_service.delete_employee(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    serializer = EmployeeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    employee, created = employee_service.replace_employee(pk, **serializer.validated_data)

    if created:
        return created_response(request, employee)
    return employee_response(request, employee)
