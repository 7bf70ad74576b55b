import math

EARTH_RADIUS_KM = 6371.0


def great_circle_distance_km(lat1, lon1, lat2, lon2):
    """
    Distancia en línea recta (haversine) entre dos puntos, en kilómetros.
    Las coordenadas vienen en grados decimales.
    """
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)

    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    # el redondeo puede dejar 'a' apenas fuera de [0, 1] en puntos antípodas
    a = min(1.0, max(0.0, a))

    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))
