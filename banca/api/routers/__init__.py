# Banca API Routers
