from django.urls import path
from . import views

urlpatterns = [
    path('api/table-rows/', views.table_rows, name='table_rows'),
    path('api/table-rows/reorder/', views.reorder_rows, name='reorder_rows'),
    path('api/table-rows/<uuid:row_id>/', views.table_row_detail, name='table_row_detail'),
    path('api/table-rows/<uuid:row_id>/info/', views.row_info, name='row_info'),
    path('api/custom-tables/', views.custom_tables, name='custom_tables'),
    path('api/custom-tables/share/<str:share_id>/', views.custom_table_by_share, name='custom_table_by_share'),
    path('api/custom-tables/<uuid:table_id>/', views.custom_table_detail, name='custom_table_detail'),
    path('api/custom-tables/<uuid:table_id>/rows/', views.custom_table_rows, name='custom_table_rows'),
    path('api/custom/<str:share_id>/view/', views.custom_table_view, name='custom_table_view'),
    path('api/selection/', views.selection_rows, name='selection_rows'),
    path('api/quick-links/', views.quick_links, name='quick_links'),
]
