# nmeadump - diagnostic dump of NMEA 0183 and AIS streams

__version__ = '0.3.0'
