"""
URL configuration for crm_project project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.urls import path, include

urlpatterns = [
    path('contacts/', include('contacts.urls')),

    # Authentication endpoints (login, tokens)
    path('auth/', include('core.user_accounts.auth_urls')),

    # Account endpoints (profile)
    path('accounts/', include('core.user_accounts.urls')),
]
