"""HTTP API tests against the Flask test client."""


class TestGraphRoutes:
    def test_graph_info(self, client):
        resp = client.get("/graph")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["edge_count"] == 5
        assert data["is_connected"] is True

    def test_adjacency(self, client):
        data = client.get("/adjacency").get_json()
        assert data["adjacency"][4] == [{"vertex": 3, "weight": 1}]

    def test_edges_sorted(self, client):
        data = client.get("/edges?order=desc").get_json()
        assert [e["weight"] for e in data["edges"]] == [7, 5, 3, 2, 1]

    def test_edges_bad_order(self, client):
        assert client.get("/edges?order=sideways").status_code == 400


class TestEdgeRoutes:
    def test_put_edge(self, client):
        resp = client.put("/edges/0/4", json={"weight": 9})
        assert resp.status_code == 201
        assert client.get("/edges/4/0").get_json()["weight"] == 9

    def test_put_duplicate(self, client):
        assert client.put("/edges/0/1", json={"weight": 2}).status_code == 409

    def test_put_directed_on_undirected(self, client):
        client.put("/edges/1/4", json={"weight": 2, "directed": True})
        assert client.get("/edges/1/4").status_code == 200
        assert client.get("/edges/4/1").status_code == 404

    def test_put_invalid_vertex(self, client):
        resp = client.put("/edges/2/2", json={})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_vertex"

    def test_delete_disconnects(self, client):
        assert client.delete("/edges/3/4").status_code == 200
        assert client.get("/graph").get_json()["is_connected"] is False

    def test_delete_missing(self, client):
        assert client.delete("/edges/0/3").status_code == 404

    def test_get_out_of_range(self, client):
        assert client.get("/edges/0/9").status_code == 400

    def test_put_non_numeric_weight(self, client):
        resp = client.put("/edges/0/4", json={"weight": "heavy"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_weight"
        assert client.get("/edges/0/4").status_code == 404
        assert client.get("/dijkstra/0").status_code == 200
        assert client.get("/floyd").status_code == 200

    def test_negative_ids_are_invalid_vertex(self, client):
        for resp in (client.get("/edges/-1/2"), client.put("/edges/-1/2", json={}), client.delete("/edges/-1/0")):
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "invalid_vertex"

    def test_non_numeric_id_is_invalid_vertex(self, client):
        resp = client.get("/edges/a/1")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_vertex"


class TestAlgorithmRoutes:
    def test_bfs(self, client):
        assert client.get("/bfs/0").get_json()["distances"] == [0, 1, 1, 2, 3]

    def test_dijkstra(self, client):
        assert client.get("/dijkstra/0").get_json()["distances"] == [0, 5, 3, 5, 6]

    def test_dijkstra_invalid_source(self, client):
        assert client.get("/dijkstra/7").status_code == 400

    def test_negative_or_text_source(self, client):
        for path in ("/bfs/-1", "/bfs/abc", "/dijkstra/-2"):
            resp = client.get(path)
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "invalid_vertex"

    def test_floyd(self, client):
        assert client.get("/floyd").get_json()["matrix"][0] == [0, 5, 3, 5, 6]

    def test_kruskal(self, client):
        resp = client.post("/mst/kruskal")
        assert resp.status_code == 200
        assert resp.get_json()["total_weight"] == 11

    def test_reverse_delete_consumes_graph(self, client):
        assert client.post("/mst/reverse_delete").get_json()["total_weight"] == 11
        assert client.get("/graph").get_json()["edge_count"] == 4

    def test_unknown_algorithm(self, client):
        assert client.post("/mst/boruvka").status_code == 404

    def test_precondition_status(self, lib):
        from adjgraph.server import create_app

        app = create_app(lib.build_example_graph(directed=True, weighted=True))
        resp = app.test_client().post("/mst/prim")
        assert resp.status_code == 422
        assert resp.get_json()["error"] == "requires_undirected_weighted"


class TestServerConfig:
    def test_explicit_zero_vertices_wins_over_environment(self, monkeypatch):
        from adjgraph.main import build_parser, graph_from_args

        monkeypatch.setenv("VERTICES", "7")
        graph = graph_from_args(build_parser().parse_args(["--vertices", "0"]))
        assert graph.vertex_count == 0
        assert graph.edge_count == 0

    def test_vertices_from_environment(self, monkeypatch):
        from adjgraph.main import build_parser, graph_from_args

        monkeypatch.setenv("VERTICES", "7")
        monkeypatch.setenv("WEIGHTED", "yes")
        graph = graph_from_args(build_parser().parse_args([]))
        assert graph.vertex_count == 7
        assert graph.weighted is True
        assert graph.edge_count == 5
