from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.DieselExpenseViewSet, basename='diesel-expense')

urlpatterns = [
    path('', include(router.urls)),
]
