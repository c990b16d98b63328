"""
PhotoShare Backend: API Routes Package
=======================================

Route Inventory:
    - root.py:    GET /                       (plain-text status line)
    - test.py:    GET /test, /test/{param}    (SchemaInfo, counts)
    - users.py:   GET /user/list              (all users)
                  GET /user/{user_id}         (one user)
    - photos.py:  GET /photosOfUser/{user_id} (photos with comment authors)

Anything else falls through to the static file mount registered last in
photoshare.main.

Routes stay thin: they pull the store from the app, call one service
method and let the global exception handlers shape error responses.
"""
