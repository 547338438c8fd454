# Routes package init
"""
StreetMap Backend — API Routes Package
========================================

Route Inventory:
    - streets.py: GET    /streets                 (list streets)
                  POST   /streets                 (add street)
                  DELETE /streets/{id}            (delete street)
                  POST   /api/update-color        (recolor street)
    - lines.py:   POST   /api/save-line           (save drawn line)
                  GET    /api/get-lines           (list lines)
                  DELETE /api/delete-line/{id}    (delete line)
    - health.py:  GET    /health                  (service health check)

Routes stay thin: extract the body or path parameter, call one repository
method, wrap the result. Error bodies come from the handlers in main.py.
"""
