from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'trips'

router = DefaultRouter()
router.register(r'', views.TripViewSet, basename='trip')

urlpatterns = [
    # GET    /api/trips/                      - List trips
    # POST   /api/trips/                      - Create trip
    # GET    /api/trips/{id}/                 - Get trip
    # PUT    /api/trips/{id}/                 - Update trip
    # PATCH  /api/trips/{id}/                 - Partial update
    # DELETE /api/trips/{id}/?confirm=true    - Delete trip
    # POST   /api/trips/{id}/toggle_status/   - Flip paid/unpaid
    path('', include(router.urls)),
]
