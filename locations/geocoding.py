import logging

import requests

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


def geocode_address(address, api_key):
    """
    Obtiene (latitud, longitud) como texto para una dirección usando la
    API de geocodificación de Google. Devuelve None si no se pudo.
    """
    if not address or not api_key:
        return None

    params = {
        "address": address,
        "key": api_key
    }
    try:
        response = requests.get(GEOCODE_URL, params=params, timeout=10)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        logger.warning("Error de conexión con la API de geocodificación: %s", e)
        return None
    except ValueError as e:
        logger.warning("Respuesta de geocodificación no es JSON válido: %s", e)
        return None

    if data.get('status') == 'OK' and data.get('results'):
        location = data['results'][0]['geometry']['location']
        return str(location['lat']), str(location['lng'])

    logger.warning(
        "No se pudo geocodificar la dirección: %s (estado: %s)",
        address, data.get('status'),
    )
    return None
