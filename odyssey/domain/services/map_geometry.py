from __future__ import annotations

from typing import Sequence

from odyssey.domain.entities import LocationCluster, MapCenter, MapView, ZoomDelta

DEFAULT_CENTER = MapCenter(latitude=39.0, longitude=35.0)
SINGLE_CLUSTER_ZOOM = ZoomDelta(lat_delta=5.0, lng_delta=5.0)
ZOOM_PADDING = 1.5
MIN_ZOOM_DELTA = 2.0


def calculate_map_center(
    clusters: Sequence[LocationCluster],
    fallback: MapCenter = DEFAULT_CENTER,
) -> MapCenter:
    """클러스터 좌표의 산술 평균. 클러스터가 없으면 기본 지역 중심."""
    if not clusters:
        return fallback

    total_lat = sum(c.latitude for c in clusters)
    total_lng = sum(c.longitude for c in clusters)
    return MapCenter(
        latitude=total_lat / len(clusters),
        longitude=total_lng / len(clusters),
    )


def calculate_zoom_delta(clusters: Sequence[LocationCluster]) -> ZoomDelta:
    """클러스터 분포 폭에 여백(x1.5)을 더한 줌 델타. 축마다 최소 2.0."""
    if len(clusters) <= 1:
        return SINGLE_CLUSTER_ZOOM

    lats = [c.latitude for c in clusters]
    lngs = [c.longitude for c in clusters]

    lat_spread = max(lats) - min(lats)
    lng_spread = max(lngs) - min(lngs)

    return ZoomDelta(
        lat_delta=max(lat_spread * ZOOM_PADDING, MIN_ZOOM_DELTA),
        lng_delta=max(lng_spread * ZOOM_PADDING, MIN_ZOOM_DELTA),
    )


def build_map_view(
    clusters: list[LocationCluster],
    fallback: MapCenter = DEFAULT_CENTER,
) -> MapView:
    return MapView(
        clusters=clusters,
        center=calculate_map_center(clusters, fallback),
        zoom=calculate_zoom_delta(clusters),
    )
