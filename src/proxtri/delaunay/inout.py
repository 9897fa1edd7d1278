'''
Output of vertices, triangles and edges as WKT to text files (e.g. for
inspection in QGIS).
'''


def output_vertices(V, fh):
    """Output list of vertices as WKT to text file (for QGIS)"""
    fh.write("id;wkt;finite;info\n")
    for v in V:
        fh.write("{0};POINT({1});{2};{3}\n".format(
            id(v), v, v.is_finite, v.info))


def output_triangles(T, dt, fh):
    """Output list of triangles as WKT to text file (for QGIS)

    The neighbours are looked up in triangulation dt, by the serial key of
    the triangles.
    """
    fh.write("id;wkt;neighbours;finite;circumradius\n")
    for t in T:
        if t is None:
            continue
        neighbours = sorted(n.key for n in dt.neighbours(t))
        fh.write("{0};{1};{2};{3};{4}\n".format(
            t.key, t,
            ",".join(str(key) for key in neighbours),
            t.is_finite, t.circumradius()))


def output_edges(E, fh):
    """Output lines as WKT to text file (for QGIS)"""
    fh.write("id;wkt;length\n")
    for i, e in enumerate(E, start=1):
        fh.write("{0};{1};{2}\n".format(i, e, e.length()))
