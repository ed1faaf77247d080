from optional_type import Optional, undefined


'''
示例: 读取嵌套配置

配置里缺失的键用 undefined 表示, 显式写成 null 的键用 None 表示.
of_undefinable 开始的链在每一次 map 之后仍然把两种标记都当作空值.
'''


CONFIG = {
    "server": {"host": "127.0.0.1", "port": "9906"},
    "client": {"timeout": None},
}


def lookup(data, *keys):
    optional = Optional.of_undefinable(data)
    for key in keys:
        optional = optional.map(lambda node, key=key: node.get(key, undefined) if isinstance(node, dict) else undefined)
    return optional


if __name__ == '__main__':
    print(lookup(CONFIG, "server", "port").map(int))
    print(lookup(CONFIG, "client", "timeout").or_else(30))
    print(lookup(CONFIG, "client", "retry").or_else_get(lambda: 3))
    lookup(CONFIG, "server", "host").if_present(lambda host: print("host:", host))
