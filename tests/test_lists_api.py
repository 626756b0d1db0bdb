from models import db, ListItem, ShoppingList

LISTS_URL = '/api/v1/lists'
RECIPES_URL = '/api/v1/recipes'


def create_list(client, headers, title='Weekly shop'):
    response = client.post(LISTS_URL, json={'title': title}, headers=headers)
    assert response.status_code == 201
    return response.get_json()


def create_recipe(client, headers, **fields):
    payload = {'title': 'pancakes', 'ingredients': '400 g flour\n2 eggs\nsalt', 'servings': 4}
    payload.update(fields)
    response = client.post(RECIPES_URL, json=payload, headers=headers)
    assert response.status_code == 201
    return response.get_json()


def add_recipe(client, headers, list_id, recipe_id, servings=None):
    payload = {'recipeId': recipe_id}
    if servings is not None:
        payload['recipeServings'] = servings
    return client.post(f'{LISTS_URL}/{list_id}/recipes', json=payload, headers=headers)


def test_create_list(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    assert shopping_list['title'] == 'Weekly shop'
    assert shopping_list['items'] == []
    assert shopping_list['recipes'] == {'href': f"/api/v1/lists/{shopping_list['id']}/recipes"}


def test_create_list_requires_title(client, auth_headers):
    response = client.post(LISTS_URL, json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'missing list title'}


def test_get_all_lists(client, auth_headers):
    create_list(client, auth_headers, 'one')
    create_list(client, auth_headers, 'two')
    db.session.add(ShoppingList(user_id='someone-else', title='theirs'))
    db.session.commit()

    response = client.get(LISTS_URL, headers=auth_headers)
    assert [lst['title'] for lst in response.get_json()] == ['one', 'two']


def test_add_recipe_scales_items(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    recipe = create_recipe(client, auth_headers)

    response = add_recipe(client, auth_headers, shopping_list['id'], recipe['id'], servings=2)
    assert response.status_code == 204

    body = client.get(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers).get_json()
    items = [{k: v for k, v in item.items() if k != 'id'} for item in body['items']]
    assert items == [
        {'name': 'flour', 'quantity': 200, 'displayQuantity': 200, 'unit': 'g',
         'recipeId': recipe['id'], 'servings': 2},
        {'name': 'eggs', 'quantity': 1, 'displayQuantity': 1, 'recipeId': recipe['id'], 'servings': 2},
        {'name': 'salt', 'recipeId': recipe['id']},
    ]
    assert body['recipes']['recipesData'] == [{
        'id': recipe['id'],
        'title': 'pancakes',
        'image': '',
        'servings': 2,
        'href': f"/api/v1/lists/{shopping_list['id']}/recipes/{recipe['id']}",
    }]


def test_add_recipe_without_servings_copies_quantities(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    recipe = create_recipe(client, auth_headers)
    add_recipe(client, auth_headers, shopping_list['id'], recipe['id'])

    items = ListItem.query.filter_by(list_id=shopping_list['id']).order_by(ListItem.id).all()
    assert [(i.name, i.quantity, i.unit) for i in items] == [
        ('flour', 400, 'g'), ('eggs', 2, None), ('salt', None, None),
    ]


def test_adding_a_second_recipe_appends(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    first = create_recipe(client, auth_headers)
    second = create_recipe(client, auth_headers, title='toast', ingredients='2 slices bread')
    add_recipe(client, auth_headers, shopping_list['id'], first['id'])
    add_recipe(client, auth_headers, shopping_list['id'], second['id'])

    body = client.get(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers).get_json()
    assert [item['name'] for item in body['items']] == ['flour', 'eggs', 'salt', 'slices bread']
    assert [r['title'] for r in body['recipes']['recipesData']] == ['pancakes', 'toast']


def test_add_recipe_errors(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    recipe = create_recipe(client, auth_headers)

    response = client.post(f"{LISTS_URL}/{shopping_list['id']}/recipes", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'missing recipe ID'}

    response = add_recipe(client, auth_headers, shopping_list['id'], 999)
    assert response.status_code == 404
    assert response.get_json() == {'error': 'recipe does not exist'}

    response = add_recipe(client, auth_headers, 999, recipe['id'])
    assert response.status_code == 404
    assert response.get_json() == {'error': 'list does not exist'}


def test_deleted_recipes_drop_out_of_recipes_data(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    recipe = create_recipe(client, auth_headers)
    add_recipe(client, auth_headers, shopping_list['id'], recipe['id'])
    client.delete(f"{RECIPES_URL}/{recipe['id']}", headers=auth_headers)

    body = client.get(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers).get_json()
    assert len(body['items']) == 3
    assert body['recipes']['recipesData'] == []


def test_remove_recipe_from_list(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    recipe = create_recipe(client, auth_headers)
    add_recipe(client, auth_headers, shopping_list['id'], recipe['id'])

    response = client.delete(
        f"{LISTS_URL}/{shopping_list['id']}/recipes/{recipe['id']}", headers=auth_headers
    )
    assert response.status_code == 204
    body = client.get(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers).get_json()
    assert body['items'] == []
    assert 'recipesData' not in body['recipes']


def test_remove_item_from_list(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    recipe = create_recipe(client, auth_headers)
    add_recipe(client, auth_headers, shopping_list['id'], recipe['id'])
    items = client.get(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers).get_json()['items']

    response = client.delete(
        f"{LISTS_URL}/{shopping_list['id']}/items/{items[0]['id']}", headers=auth_headers
    )
    assert response.status_code == 204
    items = client.get(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers).get_json()['items']
    assert [item['name'] for item in items] == ['eggs', 'salt']


def test_delete_list(client, auth_headers):
    shopping_list = create_list(client, auth_headers)
    response = client.delete(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers)
    assert response.status_code == 204
    response = client.get(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers)
    assert response.status_code == 404
    # Deleting again is not an error
    response = client.delete(f"{LISTS_URL}/{shopping_list['id']}", headers=auth_headers)
    assert response.status_code == 204
