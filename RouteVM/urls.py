"""
URL configuration for RouteVM project.
"""

from django.urls import path, include

urlpatterns = [
    path('', include('locations.urls')),  # todas las URLs de la app 'locations'
]
