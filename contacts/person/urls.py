"""
URL configuration for the Contacts Person module.
"""
from django.urls import path

from . import views

app_name = 'person'

urlpatterns = [
    path('', views.person_list, name='person_list'),
    path('search/', views.person_search, name='person_search'),
    path('mass-destroy/', views.person_mass_destroy, name='person_mass_destroy'),
    path('<int:pk>/', views.person_detail, name='person_detail'),
]
