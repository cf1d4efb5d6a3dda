import logging

from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminOrReadOnly, is_admin_request
from core.pagination import validated_list_query

from .filters import TestimonialListQuery
from .models import Testimonial, pick_avatar_color
from .serializers import PublicTestimonialSerializer, TestimonialSerializer

logger = logging.getLogger(__name__)


class TestimonialViewSet(viewsets.ModelViewSet):
    queryset = Testimonial.objects.all()
    serializer_class = TestimonialSerializer
    permission_classes = [IsAdminOrReadOnly]
    lookup_value_regex = r"[0-9]+"

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == "retrieve" and not is_admin_request(self.request):
            return queryset.filter(is_active=True)
        return queryset

    def list(self, request, *args, **kwargs):
        query = validated_list_query(TestimonialListQuery, request)
        query.check_access(request)
        page = query.paginate(query.filter(self.get_queryset()))
        serializer = self.get_serializer(page.items, many=True)
        return Response({"testimonials": serializer.data, "pagination": page.meta()})

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({"message": "Testimonial deleted successfully."})


class PublicTestimonialView(APIView):
    """Visitors leave a testimonial from the site footer."""

    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = PublicTestimonialSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        testimonial = serializer.save(
            image=pick_avatar_color(serializer.validated_data["initials"]),
            sort_order=0,
            is_active=True,
        )
        logger.info("Public testimonial %s submitted by %s", testimonial.pk, testimonial.name)
        return Response(
            {"testimonial": TestimonialSerializer(testimonial, context={"request": request}).data},
            status=status.HTTP_201_CREATED,
        )
