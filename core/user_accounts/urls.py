"""
URL Configuration for Accounts app.
Authentication endpoints are in auth_urls.py
"""
from django.urls import path

from . import views

app_name = 'accounts'

urlpatterns = [
    path('profile/', views.user_profile, name='user_profile'),
]
