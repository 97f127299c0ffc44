from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'places'

router = DefaultRouter()
router.register(r'', views.PlaceViewSet, basename='place')

urlpatterns = [
    # GET    /api/places/              - List places
    # POST   /api/places/              - Create place
    # GET    /api/places/suggest/?q=   - Autocomplete
    # GET    /api/places/{id}/         - Get place
    # PUT    /api/places/{id}/         - Update place
    # PATCH  /api/places/{id}/         - Partial update
    # DELETE /api/places/{id}/?confirm=true - Delete place
    path('', include(router.urls)),
]
