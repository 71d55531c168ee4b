"""
Contacts App - Main URL Configuration
This file routes URLs to the appropriate sub-apps within the Contacts module.
"""
from django.urls import path, include

app_name = 'contacts'

urlpatterns = [
    # Person URLs
    path('persons/', include('contacts.person.urls')),
]
