GET_TODOS = """
query getTodos {
    todos {
        id
        text
        done
        __typename
    }
}
"""

ADD_TODO = """
mutation addTodo($text: String!) {
    insert_todos(objects: {text: $text}) {
        returning {
            done
            id
            text
            __typename
        }
    }
}
"""

TOGGLE_TODO = """
mutation toggleTodo($id: uuid!, $done: Boolean!) {
    update_todos(where: {id: {_eq: $id}}, _set: {done: $done}) {
        returning {
            done
            id
            text
            __typename
        }
    }
}
"""

DELETE_TODO = """
mutation deleteTodo($id: uuid!) {
    delete_todos(where: {id: {_eq: $id}}) {
        returning {
            done
            id
            text
            __typename
        }
    }
}
"""
